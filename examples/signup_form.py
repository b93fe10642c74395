"""Signup page built from three child components.

- EmailField: plain (model, effects) update, lifted with `pair`.
- SubmitButton: reports Ok/Err to the page through its out-message (`triple`).
- Toast: older component returning (model, out_message, effects) (`alternate`).

Run with `python examples/signup_form.py`. UPDATELIFT_TRACE_UPDATES=1 and
UPDATELIFT_LOG_LEVEL=DEBUG print a trace line per page update.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from updatelift import Effects, Err, Ok, Update, alternate, field_lens, pair, traced, triple
from updatelift.tracing import setup_logger


# Effects the host would run
@dataclass(frozen=True)
class PostSignup:
    email: str


@dataclass(frozen=True)
class Notify:
    text: str


@dataclass(frozen=True)
class Routed:
    """Effect re-addressed to one of the page's child components."""

    child: str
    effect: Any


# Children
@dataclass(frozen=True)
class EmailField:
    value: str = ""
    touched: bool = False


def email_update(msg: str, email: EmailField) -> Update[EmailField]:
    return pair.pure(replace(email, value=msg, touched=True))


@dataclass(frozen=True)
class SubmitButton:
    busy: bool = False


def submit_update(msg: tuple[str, str], button: SubmitButton) -> tuple[SubmitButton, list, Any]:
    kind, detail = msg
    if kind == "click":
        return replace(button, busy=True), [PostSignup(detail)], None
    if kind == "accepted":
        return replace(button, busy=False), [], Ok(detail)
    return replace(button, busy=False), [], Err(detail)


@dataclass(frozen=True)
class Toast:
    text: str = ""
    shown: int = 0


def toast_update(msg: str, toast: Toast) -> tuple[Toast, Any, list]:
    toast = Toast(text=msg, shown=toast.shown + 1)
    closed = "closed" if msg == "" else None
    return toast, closed, [Notify(msg)] if msg else []


# Page
@dataclass(frozen=True)
class Page:
    email: EmailField = field(default_factory=EmailField)
    submit: SubmitButton = field(default_factory=SubmitButton)
    toast: Toast = field(default_factory=Toast)
    user_id: str | None = None


EMAIL = field_lens("email")
SUBMIT = field_lens("submit")
TOAST = field_lens("toast")


def _on_signup(user_id: str, page: Page) -> Update[Page]:
    return pair.sequence(
        lambda p: alternate.resolve_optional(
            lambda _out, q: pair.pure(q),
            Effects.none(),
            alternate.lift_with(TOAST, lambda e: Routed("toast", e), toast_update, "Welcome!", p),
        ),
        pair.pure(replace(page, user_id=user_id)),
    )


@traced(name="page")
def page_update(msg: tuple[str, Any], page: Page) -> Update[Page]:
    target, inner = msg
    if target == "email":
        return pair.lift_with(EMAIL, lambda e: Routed("email", e), email_update, inner, page)
    if target == "submit":
        lifted = triple.lift_with(SUBMIT, lambda e: Routed("submit", e), submit_update, inner, page)
        if lifted.out_message is None:
            return lifted.without_out_message()
        return triple.resolve_fallible(
            _on_signup,
            lambda error: Effects.of(Notify(f"Signup failed: {error}")),
            lifted,
        )
    if target == "toast":
        return alternate.resolve_optional(
            lambda _out, p: pair.pure(replace(p, toast=Toast())),
            Effects.none(),
            alternate.lift_with(TOAST, lambda e: Routed("toast", e), toast_update, inner, page),
        )
    return pair.pure(page)


def main() -> None:
    setup_logger()
    page = Page()
    messages = [
        ("email", "ada@example.com"),
        ("submit", ("click", "ada@example.com")),
        ("submit", ("rejected", "email taken")),
        ("submit", ("click", "ada@example.com")),
        ("submit", ("accepted", "user-1")),
        ("toast", ""),
    ]
    for msg in messages:
        page, effects = page_update(msg, page)
        print(f"{msg!r:45} -> effects {list(effects)}")
    print(page)


if __name__ == "__main__":
    main()
