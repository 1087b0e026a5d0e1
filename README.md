# gfastkit

A small toolkit for writing admin-style back ends.

## Modules

- `gfastkit.slice_tree` – helpers for lists of records (dicts) that refer to each other through
  parent ids.
  - `parent_son_sort` flattens the records into display order, parent first and then its
    children, depth first. Each record it places gets its level (under `flg` by default),
    a `title_prefix` and a `title_show`. A `break_level` stops the descent at a given level.
  - `push_son_to_parent` nests the records into a tree under a `children` key. It can keep
    only records whose `filter_key` matches `filter_value`, and with `show_no_child=False`
    it leaves out the empty children lists of leaves.
  - `find_son_by_parent_id` returns every descendant of an id.
  - `get_top_pid_list` returns the distinct parent ids that match no record's id.
  - `find_parent_by_son_pid` returns a record followed by all of its ancestors.
  - `find_top_parent` returns the top-most ancestor of a record, or `{}` for an empty list.
- `gfastkit.response` – the JSON envelope `{"code", "data", "message"}`. It provides
  `Response` (with `to_dict()`) and `build`, `success` (code `0`) and `failure` (code `-1`).
  `sub_str(value, n)` cuts text to `n` characters and appends `...` when it cuts.
  `render_template(source, params)` renders a Jinja2 template string in which `subStr` is
  available as a function and `sub_str` as a filter.
- `gfastkit.autobind` – `auto_bind(ctx, router, group)` calls, in name order, every
  `bind_<name>_controller(ctx, group)` method of a router object and returns the names of
  the methods it called. Classes and plain values such as strings, numbers, lists or dicts
  are rejected with `TypeError`.
- `gfastkit.registry` – `ServiceRegistry` holds one implementation per service name.
  `register(name, impl)` stores an implementation and `register(name, None)` removes it.
  `get(name)` returns the implementation and `is_registered(name)` says whether one is
  there. For the known service names (`Context`, `Middleware`, `Personal`, `SysAuthRule`,
  `SysDept`, `SysLoginLog`, `OperateLog`, `SysPost`, `SysRole`, `SysUser`, `SysUserOnline`,
  `TaskList`, `GfToken`) an implementation must have every method listed for that name in
  `SERVICE_METHODS`, or `register` raises `TypeError`. `get` on a name with nothing
  registered raises `ServiceNotRegistered`, which is an `AppError` and a `LookupError`.
- `gfastkit.errors` – `AppError` and the guards `ensure_no_error(err, msg=None)` and
  `ensure_not_none(value, msg)`.
- `gfastkit.consts` – `VERSION`, the decoded banner `logo_text()` and the OpenAPI info
  object `openapi_info()`.
- `gfastkit.cli` – `banner()`, `make_app()` and the command's `main()`.

## Installation

```
pip install .
```

## Example

```python
from gfastkit.slice_tree import push_son_to_parent
from gfastkit.response import success

menus = [
    {"id": 1, "pid": 0, "title": "System"},
    {"id": 2, "pid": 1, "title": "Users"},
]
tree = push_son_to_parent(menus)
print(success("ok", tree).to_dict())
```

## HTTP server

```
gfastkit [--host HOST] [--port PORT]
gfastkit --version
```

The command logs the banner and version and serves the application from `make_app()` on
`127.0.0.1:8000` by default, until interrupted.

The application is a WSGI callable. It serves an OpenAPI document at `GET /api.json` and has
an API group under `/api/v1`, where CORS headers are sent and `OPTIONS` requests are answered
with `204`. Handlers are added through `app.api.bind(path, handler, methods=("GET", "POST"))`:
the handler receives the query string and the JSON or form body merged into one dict, and its
return value is sent as `data` in a success envelope. An exception raised by a handler becomes
a failure envelope carrying its message. Unknown paths answer `404` and wrong methods `405`,
both with a failure envelope.

```python
from gfastkit.cli import make_app

app = make_app()
app.api.bind("/ping", lambda params: {"pong": params.get("name", "")})
```

## What it does not do

The package has no storage, no authentication and no user, role, menu, department or log
services of its own. `ServiceRegistry` only checks that registered implementations provide
the expected methods; the implementations are up to the application. Started from the
command, the server binds no API handlers, so apart from `/api.json` every request is
answered with `404`.

## Tests

```
pip install .[test]
pytest
```