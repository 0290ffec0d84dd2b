"""
Swarm Parameter Schema

Validated parameters for FireflySwarm. Every change goes through
SwarmParams.merged(), which validates the complete merged set before the
swarm touches any state, so a rejected update has no partial effect.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidParameter
from .functions import FunctionKey, to_key


class SwarmParams(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    n: int = Field(
        default=40, gt=0,
        description="Number of fireflies",
    )
    gamma: float = Field(
        default=1.0, ge=0.0,
        description="Light absorption coefficient",
    )
    beta0: float = Field(
        default=1.0, ge=0.0,
        description="Base attractiveness",
    )
    alpha: float = Field(
        default=0.2, ge=0.0,
        description="Randomization strength",
    )
    function_key: FunctionKey = Field(
        default=FunctionKey.michalewicz,
        description="Objective function to minimize",
    )

    @classmethod
    def merged(cls, current=None, **partial):
        """Validate `partial` applied on top of `current` (or the defaults).

        None values mean "not given" and leave the current value in place.

        Raises:
            UnknownFunctionKey: function_key is not a built-in
            InvalidParameter: any other rejected value or unknown name
        """
        partial = {k: v for k, v in partial.items() if v is not None}
        if "function_key" in partial:
            partial["function_key"] = to_key(partial["function_key"])
        data = current.model_dump() if current is not None else {}
        data.update(partial)
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidParameter(f"Invalid swarm parameters: {problems}") from None


DEFAULT_PARAMS = SwarmParams()


# Control metadata for UIs, in the same shape as the CA engines' slider defs
SLIDER_DEFS = [
    {"key": "n", "label": "Fireflies", "section": "POPULATION",
     "min": 5, "max": 100, "default": 40, "fmt": "d", "step": 1},
    {"key": "gamma", "label": "gamma (absorption)", "section": "ATTRACTION",
     "min": 0.01, "max": 5.0, "default": 1.0, "fmt": ".2f", "step": None},
    {"key": "beta0", "label": "beta0 (attractiveness)", "section": "ATTRACTION",
     "min": 0.1, "max": 2.0, "default": 1.0, "fmt": ".2f", "step": None},
    {"key": "alpha", "label": "alpha (randomness)", "section": "ATTRACTION",
     "min": 0.0, "max": 1.0, "default": 0.2, "fmt": ".2f", "step": None},
]
