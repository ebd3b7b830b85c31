"""Add recurrence to tasks and a (category_id, position) index on notes.

Revision ID: 002_task_recurrence
Revises: 001_initial
Create Date: 2024-02-19

recurrence is a nullable string ('daily' | 'workday'); NULL means non-recurring.
The notes index serves ordered listing and range shifts during reorder.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '002_task_recurrence'
down_revision: Union[str, None] = '001_initial'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        'tasks',
        sa.Column('recurrence', sa.String(20), nullable=True),
    )
    op.create_index(
        'ix_notes_category_position', 'notes', ['category_id', 'position'],
    )


def downgrade() -> None:
    op.drop_index('ix_notes_category_position', table_name='notes')
    op.drop_column('tasks', 'recurrence')
