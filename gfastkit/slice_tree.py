"""Helpers for flat lists of dicts that carry parent/child relations."""


def _to_int(value) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        return int(value)
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="replace")
    text = str(value).strip()
    if text.lower().startswith("0x"):
        try:
            return int(text[2:], 16)
        except ValueError:
            return 0
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return _to_int(float(text))
    except ValueError:
        return 0


def _to_str(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _to_bool(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false", "off", "no")
    return bool(value)


def parent_son_sort(
    items,
    pid=0,
    level=0,
    parent_key="pid",
    id_key="id",
    level_key="flg",
    title_key="title",
    break_level=-1,
    prefix="─",
):
    """Order *items* parent first, then children, depth first.

    Each placed item gets its level under *level_key* and the keys
    ``title_prefix`` and ``title_show``. Children below *break_level*
    are not descended into (-1 means no limit).
    """
    pid = _to_int(pid)
    level = _to_int(level)
    parent_key = _to_str(parent_key)
    id_key = _to_str(id_key)
    level_key = _to_str(level_key)
    title_key = _to_str(title_key)
    break_level = _to_int(break_level)
    prefix = _to_str(prefix)

    result = []
    for item in items:
        if _to_int(item.get(parent_key)) != pid:
            continue
        item[level_key] = level
        item["title_prefix"] = "" if level == 0 else "├" + prefix * (level + 1)
        item["title_show"] = f"{item['title_prefix']}{_to_str(item.get(title_key))}"
        result.append(item)
        if break_level != -1 and break_level == level:
            continue
        result.extend(
            parent_son_sort(
                items,
                item.get(id_key),
                level + 1,
                parent_key,
                id_key,
                level_key,
                title_key,
                break_level,
                prefix,
            )
        )
    return result


def push_son_to_parent(
    items,
    pid=0,
    parent_key="pid",
    id_key="id",
    children_key="children",
    filter_key="",
    filter_value=None,
    show_no_child=True,
):
    """Nest children under their parents, returning the items below *pid*.

    With *filter_key* set, only items whose value under it equals
    *filter_value* are kept. Leaves get an empty children list unless
    *show_no_child* is false.
    """
    pid = _to_str(pid)
    parent_key = _to_str(parent_key)
    id_key = _to_str(id_key)
    children_key = _to_str(children_key)
    filter_key = _to_str(filter_key)
    show_no_child = _to_bool(show_no_child)

    result = []
    for item in items:
        if _to_str(item.get(parent_key)) != pid:
            continue
        if filter_key and item.get(filter_key) != filter_value:
            continue
        children = push_son_to_parent(
            items,
            item.get(id_key),
            parent_key,
            id_key,
            children_key,
            filter_key,
            filter_value,
            show_no_child,
        )
        if children or show_no_child:
            item[children_key] = children
        result.append(item)
    return result


def find_son_by_parent_id(items, parent_id, parent_key, id_key):
    """Return every descendant of *parent_id*, depth first."""
    result = []
    for item in items:
        if item.get(parent_key) == parent_id:
            result.append(item)
            result.extend(find_son_by_parent_id(items, item.get(id_key), parent_key, id_key))
    return result


def get_top_pid_list(items, parent_key, id_key):
    """Return the distinct parent ids that match no item's id, in order."""
    ids = [item.get(id_key) for item in items]
    result = []
    for item in items:
        parent = item.get(parent_key)
        if parent in ids or parent in result:
            continue
        result.append(parent)
    return result


def find_parent_by_son_pid(
    items, id, filter_key="filter", parent_key="pid", filter_value=None, id_key="id"
):
    """Return the item with *id* followed by all its ancestors.

    An item holding *filter_key* is only included when its value equals
    *filter_value*; the search still climbs through it.
    """
    id = _to_int(id)
    result = []
    for item in items:
        if _to_int(item.get(id_key)) != id:
            continue
        if filter_key not in item or item[filter_key] == filter_value:
            result.append(item)
        result.extend(
            find_parent_by_son_pid(
                items,
                _to_int(item.get(parent_key)),
                filter_key,
                parent_key,
                filter_value,
                id_key,
            )
        )
    return result


def find_top_parent(items, id, parent_key="pid", id_key="id"):
    """Return the top-most ancestor of the item with *id*."""
    if not items:
        return {}
    target = _to_int(id)
    top = next((item for item in items if _to_int(item.get(id_key)) == target), {})
    while True:
        for item in items:
            if _to_int(top.get(parent_key)) == _to_int(item.get(id_key)):
                top = item
                break
        else:
            return top