"""Users, groups and a manager that keeps the two in step."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field

SEPARATOR = "-" * 19


class UserManagerError(Exception):
    """Base class for errors raised by :class:`UserManager`."""


class AlreadyExistsError(UserManagerError):
    """A user or group with the given id is already registered."""


class NotFoundError(UserManagerError, LookupError):
    """No user or group with the given id is registered."""


@dataclass(eq=False)
class User:
    """A registered user; it refers to its group weakly."""

    user_id: int
    username: str
    email: str
    age: int
    _group_ref: weakref.ref | None = field(default=None, init=False, repr=False)

    def group(self) -> Group | None:
        """Return the user's group, or None if there is none or it is gone."""
        return None if self._group_ref is None else self._group_ref()

    def set_group(self, group: Group | None) -> None:
        """Attach the user to ``group``, or detach it when ``group`` is None."""
        self._group_ref = None if group is None else weakref.ref(group)


class Group:
    """A group that refers to its members weakly."""

    def __init__(self, group_id: int) -> None:
        self.group_id = group_id
        self._members: list[weakref.ref[User]] = []

    def __repr__(self) -> str:
        return f"Group(group_id={self.group_id!r})"

    def add_user(self, user: User) -> None:
        """Add ``user`` to the group."""
        self._members.append(weakref.ref(user))
        self._purge()

    def remove_user(self, user: User) -> None:
        """Remove every member with the same id as ``user``."""
        kept = []
        for ref in self._members:
            member = ref()
            if member is not None and member.user_id != user.user_id:
                kept.append(ref)
        self._members = kept

    def members(self) -> list[User]:
        """Return the members that are still alive, in the order they joined."""
        self._purge()
        return [member for member in (ref() for ref in self._members) if member is not None]

    def _purge(self) -> None:
        self._members = [ref for ref in self._members if ref() is not None]


class UserManager:
    """Registry of users and groups, keyed by id."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._groups: dict[int, Group] = {}

    def create_user(
        self,
        user_id: int,
        username: str,
        email: str,
        age: int,
        group_id: int | None = None,
    ) -> User:
        """Register a new user; an unknown ``group_id`` leaves it without a group."""
        if user_id in self._users:
            raise AlreadyExistsError(f"user {user_id} already exists")
        user = User(user_id, username, email, age)
        if group_id is not None:
            group = self._groups.get(group_id)
            if group is not None:
                user.set_group(group)
                group.add_user(user)
        self._users[user_id] = user
        return user

    def delete_user(self, user_id: int) -> None:
        """Remove a user and take it out of its group."""
        try:
            user = self._users.pop(user_id)
        except KeyError:
            raise NotFoundError(f"user {user_id} not found") from None
        group = user.group()
        if group is not None:
            group.remove_user(user)

    def get_user(self, user_id: int) -> User:
        """Return the user with ``user_id``."""
        try:
            return self._users[user_id]
        except KeyError:
            raise NotFoundError(f"user {user_id} not found") from None

    def users(self) -> list[User]:
        """Return all users ordered by id."""
        return [self._users[user_id] for user_id in sorted(self._users)]

    def create_group(self, group_id: int) -> Group:
        """Register a new, empty group."""
        if group_id in self._groups:
            raise AlreadyExistsError(f"group {group_id} already exists")
        group = Group(group_id)
        self._groups[group_id] = group
        return group

    def delete_group(self, group_id: int) -> None:
        """Remove a group and detach its members from it."""
        if group_id not in self._groups:
            raise NotFoundError(f"group {group_id} not found")
        for user in self._users.values():
            group = user.group()
            if group is not None and group.group_id == group_id:
                user.set_group(None)
        del self._groups[group_id]

    def get_group(self, group_id: int) -> Group:
        """Return the group with ``group_id``."""
        try:
            return self._groups[group_id]
        except KeyError:
            raise NotFoundError(f"group {group_id} not found") from None

    def groups(self) -> list[Group]:
        """Return all groups ordered by id."""
        return [self._groups[group_id] for group_id in sorted(self._groups)]


def format_user(user: User) -> str:
    """Render a user as a block of text ending with a separator line."""
    lines = [
        f"User ID: {user.user_id}",
        f"Username: {user.username}",
        f"Email: {user.email}",
        f"Age: {user.age}",
    ]
    group = user.group()
    lines.append(f"Group ID: {group.group_id}" if group is not None else "Not in a group.")
    lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"


def format_group(group: Group) -> str:
    """Render a group and its members as a block of text."""
    members = group.members()
    if not members:
        body = "Users: None"
    else:
        body = "Users:" + "".join(
            f"\n  {member.username} (ID: {member.user_id})" for member in members
        )
    return f"Group ID: {group.group_id}\n{body}\n{SEPARATOR}\n"