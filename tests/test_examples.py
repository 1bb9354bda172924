"""The example apps, driven through the public API."""

import asyncio
from functools import partial

from fakes import messages_of

from examples.counter import Counter, Decrement, Increment, Reset, host_update, update
from examples.login import (
    App,
    AuthReplied,
    Clicked,
    FromLogin,
    LoginForm,
    Submitted,
    Typed,
    app_update,
    fake_authenticate,
    login_update,
    main,
)
from stepwise import Outcome, replay, stay


def test_counter_decrement_below_floor_stays() -> None:
    assert update(Decrement(), Counter()) == stay()
    assert host_update(Decrement(), Counter(count=1)) == (Counter(count=0), ())


def test_counter_reset_untouched_is_stay() -> None:
    assert update(Reset(), Counter()) == stay()


def test_counter_replay() -> None:
    step = replay(update, (Counter(), []), [Increment(), Increment(by=4), Decrement(by=10), Reset()])
    assert step.state == Counter(count=0)


def test_login_requires_username() -> None:
    step = login_update(Submitted(), LoginForm(), fake_authenticate)
    assert step.state.error == "username is required"


def test_login_submit_queues_authentication() -> None:
    form = LoginForm(username="bob", password="hunter2")
    step = login_update(Submitted(), form, fake_authenticate)
    assert step.state.pending
    assert messages_of(step) == [AuthReplied(Outcome.Success("bob"))]


def test_login_submit_while_pending_stays() -> None:
    assert login_update(Submitted(), LoginForm(username="bob", pending=True), fake_authenticate) == stay()


def test_login_failure_reports_error() -> None:
    form = LoginForm(username="bob", password="nope")
    (reply,) = messages_of(login_update(Submitted(), form, fake_authenticate))
    step = login_update(reply, form.model_copy(update={"pending": True}), fake_authenticate)
    assert not step.state.pending
    assert "wrong password" in step.state.error


def test_app_lifts_login_messages() -> None:
    form = LoginForm(username="bob", password="hunter2")
    step = app_update(FromLogin(Submitted()), App(login=form), fake_authenticate)
    assert step.state.login.pending
    assert messages_of(step) == [FromLogin(AuthReplied(Outcome.Success("bob")))]


def test_app_takes_over_when_login_exits() -> None:
    step = app_update(FromLogin(AuthReplied(Outcome.Success("bob"))), App(), fake_authenticate)
    assert step.state == App(login=None, user="bob")


def test_app_ignores_clicks_before_login() -> None:
    assert app_update(Clicked(), App(), fake_authenticate) == stay()


def test_app_replay_through_login() -> None:
    update = partial(app_update, authenticate=fake_authenticate)
    step = replay(
        update,
        (App(), []),
        [
            FromLogin(Typed("username", "bob")),
            FromLogin(AuthReplied(Outcome.Success("bob"))),
            Clicked(),
            Clicked(),
        ],
    )
    assert step.state == App(login=None, user="bob", clicks=2)


def test_main_loop_logs_in() -> None:
    app = asyncio.run(main())
    assert app.user == "bob"
    assert app.login is None
