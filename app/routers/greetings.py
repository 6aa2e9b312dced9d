# =============================================================================
# app/routers/greetings.py - Greeting Endpoints
# =============================================================================
# Plain-text routes showing static paths, path parameters, custom parameter
# validation and ranked routes.
#
# GET /hello/{age} is ranked:
#   1. Age guard (an integer of at least 18) -> welcome
#   2. any integer                             -> come back later
#   neither                                    -> 404
# =============================================================================

from typing import NamedTuple, Optional

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.routers.params import no_match, parse_int_param

router = APIRouter(default_response_class=PlainTextResponse)

ADULT_AGE = 18


class Age(NamedTuple):
    """An age old enough to enter."""
    value: int

    @classmethod
    def from_param(cls, raw: str) -> Optional["Age"]:
        """Build an Age from a path segment, None if it isn't an adult age."""
        value = parse_int_param(raw)
        if value is None or value < ADULT_AGE:
            return None
        return cls(value)


@router.get("/")
async def hello():
    """Hello world."""
    return "Hello world!"


@router.get("/hello/{name}/{age}")
async def person(name: str, age: str):
    """Greet someone by name and age."""
    years = parse_int_param(age)
    if years is None:
        raise no_match()
    return f"Hello, {years} year old named {name}!"


@router.get("/hello/{age}")
async def age_check(age: str):
    """Let adults in and send children away."""
    adult = Age.from_param(age)
    if adult is not None:
        return f"At {adult.value}, you are old enough: welcome!"

    years = parse_int_param(age)
    if years is not None:
        return f"Sorry, {years} is too young to enter, come back in a few years."

    raise no_match()
