"""Note Writers — create appends, edit keeps position, delete renumbers, listing is ordered.

Tests cover:
    - New notes are appended at position N
    - Editing changes name and content, never position
    - Deleting a note closes the gap; deleting the last note shifts nothing
    - Listing returns notes by position and filters by name
    - Unknown category / note → 404
"""

from uuid import uuid4


async def test_create_appends_at_end(client, category, make_notes, read_positions):
    await make_notes(category.id, 3)
    res = await client.post(
        f"/api/v1/categories/{category.id}/notes",
        json={"name": "Groceries", "content": "milk"},
    )
    assert res.status_code == 201
    assert res.json()["position"] == 3
    positions = await read_positions(category.id)
    assert sorted(positions.values()) == [0, 1, 2, 3]


async def test_create_in_empty_category_starts_at_zero(client, category):
    res = await client.post(
        f"/api/v1/categories/{category.id}/notes",
        json={"name": "First", "content": "hello"},
    )
    assert res.status_code == 201
    assert res.json()["position"] == 0


async def test_create_requires_name_and_content(client, category):
    res = await client.post(
        f"/api/v1/categories/{category.id}/notes",
        json={"name": "   ", "content": "x"},
    )
    assert res.status_code == 400


async def test_create_in_unknown_category_returns_404(client):
    res = await client.post(
        f"/api/v1/categories/{uuid4()}/notes",
        json={"name": "Lost", "content": "x"},
    )
    assert res.status_code == 404


async def test_delete_middle_note_renumbers_trailing(
    client, category, make_notes, read_positions,
):
    notes = await make_notes(category.id, 5)
    res = await client.delete(f"/api/v1/notes/{notes[1].id}")
    assert res.status_code == 204
    positions = await read_positions(category.id)
    assert notes[1].id not in positions
    assert [positions[n.id] for n in (notes[0], *notes[2:])] == [0, 1, 2, 3]


async def test_delete_last_note_keeps_others(
    client, category, make_notes, read_positions,
):
    notes = await make_notes(category.id, 3)
    res = await client.delete(f"/api/v1/notes/{notes[2].id}")
    assert res.status_code == 204
    assert await read_positions(category.id) == {notes[0].id: 0, notes[1].id: 1}


async def test_delete_unknown_note_returns_404(client):
    res = await client.delete(f"/api/v1/notes/{uuid4()}")
    assert res.status_code == 404


async def test_list_is_ordered_by_position(client, category, make_notes):
    notes = await make_notes(category.id, 4)
    await client.post(
        "/api/v1/reorder-notes",
        json={
            "movedNoteId": str(notes[3].id),
            "positionMovedFrom": 3, "positionMovedTo": 0,
        },
    )
    res = await client.get(f"/api/v1/categories/{category.id}/notes")
    assert res.status_code == 200
    assert [n["name"] for n in res.json()] == ["Note 3", "Note 0", "Note 1", "Note 2"]
    assert [n["position"] for n in res.json()] == [0, 1, 2, 3]


async def test_list_filters_by_name(client, category, make_notes):
    await make_notes(category.id, 12)
    res = await client.get(
        f"/api/v1/categories/{category.id}/notes", params={"q": "Note 1"},
    )
    assert [n["name"] for n in res.json()] == ["Note 1", "Note 10", "Note 11"]


async def test_list_unknown_category_returns_404(client):
    res = await client.get(f"/api/v1/categories/{uuid4()}/notes")
    assert res.status_code == 404


async def test_edit_changes_text_and_keeps_position(
    client, category, make_notes, read_positions,
):
    notes = await make_notes(category.id, 3)
    res = await client.put(
        f"/api/v1/notes/{notes[1].id}",
        json={"name": "  Renamed  ", "content": "new body"},
    )
    assert res.status_code == 200
    body = res.json()
    assert (body["name"], body["content"], body["position"]) == ("Renamed", "new body", 1)
    positions = await read_positions(category.id)
    assert [positions[n.id] for n in notes] == [0, 1, 2]


async def test_edit_requires_name(client, category, make_notes):
    notes = await make_notes(category.id, 1)
    res = await client.put(f"/api/v1/notes/{notes[0].id}", json={"name": " "})
    assert res.status_code == 400


async def test_edit_unknown_note_returns_404(client):
    res = await client.put(f"/api/v1/notes/{uuid4()}", json={"name": "Ghost"})
    assert res.status_code == 404
