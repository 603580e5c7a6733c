# created: 10/19/2026
# last updated: 10/19/2026
# the answer we send back: material, grade, advantages, disadvantages

from dataclasses import dataclass
from typing import Any, List

from material_proxy.errors import ErrorKind, ProxyError


@dataclass(frozen=True)
class MaterialRecommendation:
    material: str
    grade: str
    advantages: List[str]
    disadvantages: List[str]


def _malformed(detail: str) -> ProxyError:
    return ProxyError(ErrorKind.MALFORMED_UPSTREAM_PAYLOAD, detail)


def validate_recommendation(data: Any) -> MaterialRecommendation:
    """Check the model answer has the recommendation shape.

    Raises ProxyError(MALFORMED_UPSTREAM_PAYLOAD) on the first problem found.
    Extra keys are allowed.
    """
    if not isinstance(data, dict):
        raise _malformed(f"answer is a {type(data).__name__}, expected an object")

    for key in ("material", "grade"):
        if not isinstance(data.get(key), str):
            raise _malformed(f"'{key}' is missing or not a string")

    for key in ("advantages", "disadvantages"):
        items = data.get(key)
        if not isinstance(items, list):
            raise _malformed(f"'{key}' is missing or not a list")
        if not all(isinstance(item, str) for item in items):
            raise _malformed(f"'{key}' contains a non-string item")

    return MaterialRecommendation(
        material=data["material"],
        grade=data["grade"],
        advantages=list(data["advantages"]),
        disadvantages=list(data["disadvantages"]),
    )
