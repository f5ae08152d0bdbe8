from rest_framework import permissions

MANAGER_GROUP = 'manager'


def is_manager(user) -> bool:
    return bool(
        user
        and user.is_authenticated
        and (user.is_staff or user.groups.filter(name=MANAGER_GROUP).exists())
    )


class IsManager(permissions.BasePermission):
    """
    Allow only staff users and members of the manager group.
    """
    def has_permission(self, request, view):
        return is_manager(request.user)


class IsManagerOrReadOnly(permissions.BasePermission):
    """
    Any authenticated user may read; only managers may create, change or delete.
    """
    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        if request.method in permissions.SAFE_METHODS:
            return True
        return is_manager(request.user)
