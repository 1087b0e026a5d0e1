import pytest

from gfastkit.slice_tree import (
    find_parent_by_son_pid,
    find_son_by_parent_id,
    find_top_parent,
    get_top_pid_list,
    parent_son_sort,
    push_son_to_parent,
)


@pytest.fixture
def menu():
    return [
        {"id": 1, "pid": 0, "title": "root"},
        {"id": 2, "pid": 1, "title": "child"},
        {"id": 3, "pid": 2, "title": "grand"},
        {"id": 4, "pid": 0, "title": "other"},
    ]


def test_parent_son_sort_orders_depth_first(menu):
    result = parent_son_sort(menu)
    assert [item["id"] for item in result] == [1, 2, 3, 4]
    assert [item["flg"] for item in result] == [0, 1, 2, 0]


def test_parent_son_sort_titles(menu):
    result = parent_son_sort(menu)
    by_id = {item["id"]: item for item in result}
    assert by_id[1]["title_prefix"] == ""
    assert by_id[1]["title_show"] == "root"
    assert by_id[2]["title_prefix"].startswith("├")
    assert by_id[3]["title_show"].endswith("grand")
    assert len(by_id[3]["title_prefix"]) > len(by_id[2]["title_prefix"])


def test_parent_son_sort_break_level(menu):
    result = parent_son_sort(menu, break_level=0)
    assert [item["id"] for item in result] == [1, 4]


def test_parent_son_sort_custom_keys():
    items = [
        {"key": 10, "parent": 0, "name": "a"},
        {"key": 11, "parent": 10, "name": "b"},
    ]
    result = parent_son_sort(items, 0, 0, "parent", "key", "depth", "name", -1, "=")
    assert [item["depth"] for item in result] == [0, 1]
    assert result[1]["title_show"].endswith("b")
    assert set(result[1]["title_prefix"][1:]) == {"="}


def test_push_son_to_parent_builds_tree(menu):
    tree = push_son_to_parent(menu)
    assert [node["id"] for node in tree] == [1, 4]
    assert tree[0]["children"][0]["id"] == 2
    assert tree[0]["children"][0]["children"][0]["id"] == 3
    assert tree[1]["children"] == []


def test_push_son_to_parent_hides_empty_children(menu):
    tree = push_son_to_parent(menu, show_no_child=False)
    assert "children" not in tree[1]
    assert "children" in tree[0]


def test_push_son_to_parent_filters():
    items = [
        {"id": 1, "pid": 0, "status": 1},
        {"id": 2, "pid": 1, "status": 0},
        {"id": 3, "pid": 1, "status": 1},
    ]
    tree = push_son_to_parent(items, filter_key="status", filter_value=1)
    assert [child["id"] for child in tree[0]["children"]] == [3]


def test_push_son_to_parent_compares_ids_as_text():
    items = [{"id": "1", "pid": "0"}, {"id": "2", "pid": 1}]
    tree = push_son_to_parent(items)
    assert tree[0]["children"][0]["id"] == "2"


def test_find_son_by_parent_id(menu):
    result = find_son_by_parent_id(menu, 1, "pid", "id")
    assert [item["id"] for item in result] == [2, 3]


def test_find_son_by_parent_id_no_match(menu):
    assert find_son_by_parent_id(menu, 99, "pid", "id") == []


def test_get_top_pid_list(menu):
    assert get_top_pid_list(menu, "pid", "id") == [0]


def test_get_top_pid_list_with_orphan(menu):
    menu.append({"id": 5, "pid": 99})
    assert get_top_pid_list(menu, "pid", "id") == [0, 99]


def test_find_parent_by_son_pid(menu):
    result = find_parent_by_son_pid(menu, 3)
    assert [item["id"] for item in result] == [3, 2, 1]


def test_find_parent_by_son_pid_filter_skips_but_climbs():
    items = [
        {"id": 1, "pid": 0, "filter": 1},
        {"id": 2, "pid": 1, "filter": 0},
        {"id": 3, "pid": 2, "filter": 1},
    ]
    result = find_parent_by_son_pid(items, 3, "filter", "pid", 1, "id")
    assert [item["id"] for item in result] == [3, 1]


def test_find_top_parent(menu):
    assert find_top_parent(menu, 3) is menu[0]
    assert find_top_parent(menu, 4) is menu[3]


def test_find_top_parent_string_ids():
    items = [{"id": "7", "pid": "0"}, {"id": "8", "pid": "7"}]
    assert find_top_parent(items, 8) is items[0]


def test_find_top_parent_empty():
    assert find_top_parent([], 1) == {}