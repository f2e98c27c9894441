from artic_selector.models.schemas import Artwork
from artic_selector.selection.reconciler import SelectionSet


def arts(*ids):
    return [Artwork(id=i, title=f"Art {i}") for i in ids]


def test_toggle_on_current_page_keeps_other_pages():
    selection = SelectionSet(arts(1, 2, 3))
    current_page = arts(1, 2)

    selection.merge_page(current_page, arts(2))

    assert selection.ids == {2, 3}


def test_deselecting_whole_page_leaves_other_pages():
    selection = SelectionSet(arts(1, 2, 11, 12))
    selection.merge_page(arts(1, 2, 3), [])
    assert selection.ids == {11, 12}


def test_selecting_on_second_page_does_not_erase_first_page():
    selection = SelectionSet()
    selection.merge_page(arts(1, 2, 3), arts(1, 3))
    selection.merge_page(arts(4, 5, 6), arts(5))
    assert selection.ids == {1, 3, 5}


def test_bulk_merge_is_additive_and_deduplicated():
    selection = SelectionSet(arts(5))
    added = selection.merge_bulk(arts(5, 6, 7))
    assert selection.ids == {5, 6, 7}
    assert len(selection) == 3
    assert added == 2


def test_bulk_merge_never_removes():
    selection = SelectionSet(arts(100, 200))
    selection.merge_bulk(arts(1, 2))
    assert selection.ids == {1, 2, 100, 200}


def test_constructor_deduplicates():
    assert len(SelectionSet(arts(1, 1, 2))) == 2


def test_visible_follows_page_order():
    selection = SelectionSet(arts(9, 3, 50))
    assert [r.id for r in selection.visible(arts(1, 3, 9))] == [3, 9]


def test_contains_by_id_or_record():
    selection = SelectionSet(arts(4))
    assert 4 in selection
    assert Artwork(id=4) in selection
    assert 5 not in selection


def test_clear():
    selection = SelectionSet(arts(1, 2))
    selection.clear()
    assert len(selection) == 0
    assert selection.records == []
