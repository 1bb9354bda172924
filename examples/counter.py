"""Counter - the smallest step-returning update function."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from stepwise import Step, as_update_function, from_optional, stay, to


class Counter(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = 0
    floor: int = 0


@dataclass(frozen=True)
class Increment:
    by: int = 1


@dataclass(frozen=True)
class Decrement:
    by: int = 1


@dataclass(frozen=True)
class Reset:
    pass


def decremented(counter: Counter, by: int) -> Counter | None:
    """The decremented counter, or None when it would drop below the floor."""
    if counter.count - by < counter.floor:
        return None
    return counter.model_copy(update={"count": counter.count - by})


def update(msg: object, counter: Counter) -> Step[Counter, object, None]:
    if isinstance(msg, Increment):
        return to(counter.model_copy(update={"count": counter.count + msg.by}))
    if isinstance(msg, Decrement):
        return from_optional(decremented(counter, msg.by))
    if isinstance(msg, Reset):
        # Resetting an untouched counter is not a transition
        if counter.count == counter.floor:
            return stay()
        return to(counter.model_copy(update={"count": counter.floor}))
    return stay()


host_update = as_update_function(update)


if __name__ == "__main__":
    model = Counter()
    for msg in (Increment(), Increment(by=4), Decrement(by=10), Reset(), Reset()):
        model, _ = host_update(msg, model)
        print(f"{msg!r:>20} -> {model.count}")
