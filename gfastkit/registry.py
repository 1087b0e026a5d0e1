"""Registry of service implementations looked up by interface name."""

from gfastkit.errors import AppError

SERVICE_METHODS = {
    "Context": ("init", "get", "set_user", "get_login_user", "get_user_id"),
    "Middleware": ("ctx", "auth"),
    "Personal": ("get_personal_info", "edit_personal", "reset_pwd_personal"),
    "SysAuthRule": (
        "get_menu_list_search",
        "get_is_menu_list",
        "get_menu_list",
        "get_is_button_list",
        "add",
        "bind_role_rule",
        "get",
        "get_menu_roles",
        "update",
        "update_role_rule",
        "get_menu_list_tree",
        "delete_menu_by_ids",
        "find_son_by_parent_id",
    ),
    "SysDept": (
        "get_list",
        "get_from_cache",
        "add",
        "edit",
        "delete",
        "find_son_by_parent_id",
        "get_list_tree",
        "get_by_dept_id",
    ),
    "SysLoginLog": ("invoke", "list", "delete_login_log_by_ids", "clear_login_log"),
    "OperateLog": (
        "operation_log",
        "invoke",
        "list",
        "get_by_oper_id",
        "delete_by_ids",
        "clear_log",
    ),
    "SysPost": ("list", "add", "edit", "delete", "get_used_post"),
    "SysRole": (
        "get_role_list_search",
        "get_role_list",
        "add_role_rule",
        "del_role_rule",
        "add_role",
        "get",
        "get_filtered_named_policy",
        "edit_role",
        "delete_by_ids",
    ),
    "SysUser": (
        "get_cas_bin_user_prefix",
        "not_check_auth_admin_ids",
        "get_admin_user_by_username_password",
        "get_user_by_username",
        "get_user_by_id",
        "login_log",
        "update_login_info",
        "get_admin_rules",
        "get_admin_role",
        "get_admin_role_ids",
        "get_all_menus",
        "get_admin_menus_by_role_ids",
        "get_menus_tree",
        "get_permissions",
        "list",
        "get_users_role_dept",
        "add",
        "edit",
        "add_user_post",
        "edit_user_role",
        "user_name_or_mobile_exists",
        "get_edit_user",
        "get_user_info_by_id",
        "get_user_post_ids",
        "reset_user_pwd",
        "change_user_status",
        "delete",
        "get_users",
    ),
    "SysUserOnline": (
        "invoke",
        "save_online",
        "check_user_online",
        "get_online_list_page",
        "user_is_online",
        "delete_online_by_token",
        "force_logout",
        "get_infos_by_ids",
    ),
    "TaskList": ("add_task", "get_by_name", "edit_params"),
    "GfToken": (
        "generate_token",
        "middleware",
        "parse_token",
        "is_login",
        "get_request_token",
        "remove_token",
        "get_token_data",
    ),
}


class ServiceNotRegistered(AppError, LookupError):
    """Raised when a service is requested before an implementation is registered."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"implement not found for interface I{name}, forgot register?")


class ServiceRegistry:
    """Holds one implementation per service name.

    Implementations for the known services must provide every method the
    service declares; other names accept any object.
    """

    def __init__(self):
        self._services = {}

    def register(self, name, impl):
        """Register *impl* under *name*, replacing any earlier one.

        Registering None removes the implementation.
        """
        if impl is None:
            self._services.pop(name, None)
            return
        missing = [
            method
            for method in SERVICE_METHODS.get(name, ())
            if not callable(getattr(impl, method, None))
        ]
        if missing:
            raise TypeError(
                f"{type(impl).__name__} does not implement I{name}: "
                f"missing {', '.join(missing)}"
            )
        self._services[name] = impl

    def get(self, name):
        """Return the implementation registered under *name*."""
        try:
            return self._services[name]
        except KeyError:
            raise ServiceNotRegistered(name) from None

    def is_registered(self, name):
        """Return whether an implementation is registered under *name*."""
        return name in self._services