"""Login - a child interaction that exits with a username.

The app lifts the login form's steps with ``within`` and takes over with
``on_exit`` once the form has a user to hand back.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import partial

from pydantic import BaseModel, ConfigDict

from stepwise import Outcome, Step, as_update_function, stay, to

Authenticate = Callable[[str, str], Awaitable[str]]


class LoginForm(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str = ""
    password: str = ""
    pending: bool = False
    error: str | None = None


class App(BaseModel):
    model_config = ConfigDict(frozen=True)

    login: LoginForm | None = LoginForm()
    user: str | None = None
    clicks: int = 0


# --- Login form messages ---


@dataclass(frozen=True)
class Typed:
    field: str
    value: str


@dataclass(frozen=True)
class Submitted:
    pass


@dataclass(frozen=True)
class AuthReplied:
    outcome: Outcome[str]


# --- App messages ---


@dataclass(frozen=True)
class FromLogin:
    inner: Typed | Submitted | AuthReplied


@dataclass(frozen=True)
class Clicked:
    pass


def login_update(msg: object, form: LoginForm, authenticate: Authenticate) -> Step[LoginForm, object, str]:
    """Update the login form; exits with the username once authenticated."""
    if isinstance(msg, Typed):
        if msg.field not in ("username", "password"):
            return stay()
        return to(form.model_copy(update={msg.field: msg.value, "error": None}))

    if isinstance(msg, Submitted):
        if form.pending:
            return stay()
        if not form.username:
            return to(form.model_copy(update={"error": "username is required"}))
        return to(form.model_copy(update={"pending": True, "error": None})).with_effect_from_async_operation(
            AuthReplied,
            lambda: authenticate(form.username, form.password),
        )

    if isinstance(msg, AuthReplied):
        if msg.outcome.ok:
            return Step.Exit(msg.outcome.value)
        return to(form.model_copy(update={"pending": False, "error": str(msg.outcome.error)}))

    return stay()


def app_update(msg: object, app: App, authenticate: Authenticate) -> Step[App, object, None]:
    if isinstance(msg, FromLogin):
        if app.login is None:
            return stay()
        return (
            login_update(msg.inner, app.login, authenticate)
            .within(lambda form: app.model_copy(update={"login": form}), FromLogin)
            .on_exit(lambda name: to(app.model_copy(update={"login": None, "user": name})))
        )

    if isinstance(msg, Clicked):
        if app.user is None:
            return stay()
        return to(app.model_copy(update={"clicks": app.clicks + 1}))

    return stay()


async def fake_authenticate(username: str, password: str) -> str:
    await asyncio.sleep(0)
    if password != "hunter2":
        raise PermissionError(f"wrong password for {username}")
    return username


async def main() -> App:
    """Drive the app the way a host runtime would: perform effects, feed messages back."""
    host_update = as_update_function(partial(app_update, authenticate=fake_authenticate))
    queue: list[object] = [
        FromLogin(Typed("username", "bob")),
        FromLogin(Typed("password", "hunter2")),
        FromLogin(Submitted()),
    ]
    app = App()
    while queue:
        app, effects = host_update(queue.pop(0), app)
        for effect in effects:
            queue.append(await effect.perform())
    return app


if __name__ == "__main__":
    print(asyncio.run(main()))
