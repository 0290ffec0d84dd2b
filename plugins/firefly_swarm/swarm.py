"""
FireflySwarm - Firefly Algorithm Optimizer

Owns an ordered population of fireflies and drives it with two
independent clocks:

- step(): one generation of the Firefly Algorithm (Xin-She Yang).
  Every firefly moves towards each brighter one, in population order,
  updating its own position in place as it goes.
- advance_time(dt): the bioluminescent layer. Females first look for
  bright males nearby, then every firefly advances its flash timer.

The swarm also keeps the best solution ever seen as an independent
snapshot, so later moves of the live firefly cannot change it.
"""

import numpy as np

from .config import SwarmParams, SLIDER_DEFS
from .firefly import Firefly, FEMALE
from .functions import lookup


class FireflySwarm:

    def __init__(self, rng=None, seed=None, **params):
        """
        Args:
            rng: numpy.random.Generator; built from `seed` when omitted
            seed: Seed for the Generator (ignored when rng is given)
            **params: n, gamma, beta0, alpha, function_key (see SwarmParams)
        """
        self.params = SwarmParams.merged(None, **params)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.objective = lookup(self.params.function_key)

        self.fireflies = []
        self.generation = 0
        self.best = None
        self._next_id = 0

        self.initialize()

    @property
    def domain(self):
        return self.objective.domain

    # ── Population lifecycle ──────────────────────────────────────────

    def _spawn(self):
        """Create one firefly at a uniform random position in the domain."""
        d = self.domain
        x = d.x_min + self.rng.random() * d.width
        y = d.y_min + self.rng.random() * d.height
        firefly = Firefly(x, y, self.objective, self.rng, agent_id=self._next_id)
        self._next_id += 1
        return firefly

    def initialize(self):
        """Replace the population with n fresh fireflies and forget the best."""
        self.fireflies = [self._spawn() for _ in range(self.params.n)]
        self.generation = 0
        self.best = None
        self.update_best()

    def reset(self):
        self.initialize()

    def update_best(self):
        """Snapshot the population minimum if it beats the best so far."""
        if not self.fireflies:
            return
        current = min(self.fireflies, key=lambda f: f.value)
        if self.best is None or current.value < self.best.value:
            self.best = current.clone()

    def _adjust_population(self, n):
        """Grow with fresh fireflies, or keep the n lowest-valued ones."""
        if n > len(self.fireflies):
            while len(self.fireflies) < n:
                self.fireflies.append(self._spawn())
        elif n < len(self.fireflies):
            # sort is stable: equal values keep their current order
            self.fireflies.sort(key=lambda f: f.value)
            del self.fireflies[n:]

    # ── Discrete clock ────────────────────────────────────────────────

    def step(self):
        """Run one generation. Returns the generation, best and population.

        Comparisons always use the live values, so a firefly that has
        already moved this generation is compared at its new position.
        """
        p = self.params
        domain = self.domain

        for i, firefly in enumerate(self.fireflies):
            moved = False
            for j, other in enumerate(self.fireflies):
                if i == j:
                    continue
                if other.value < firefly.value:
                    firefly.move_towards(other, p.beta0, p.gamma, p.alpha, domain)
                    moved = True

            # Brightest firefly: small random walk instead
            if not moved:
                firefly.random_walk(p.alpha * 0.1, domain)

        self.generation += 1
        self.update_best()

        return {
            "generation": self.generation,
            "best": self.best,
            "fireflies": self.fireflies,
        }

    def step_n(self, n):
        """Run n generations. Returns the last step() result."""
        result = None
        for _ in range(n):
            result = self.step()
        return result

    # ── Continuous clock ──────────────────────────────────────────────

    def advance_time(self, dt):
        """Advance flash timers by dt milliseconds.

        All response checks run before any timer moves, so every check in
        this call sees intensities from the previous call.
        """
        domain = self.domain
        for firefly in self.fireflies:
            if firefly.gender == FEMALE:
                firefly.check_for_nearby_flash(self.fireflies, domain)

        for firefly in self.fireflies:
            firefly.update_flash(dt)

    # ── Parameters ────────────────────────────────────────────────────

    def set_params(self, **params):
        """Update parameters. Validates everything before changing anything.

        A new function rebinds and re-evaluates every firefly (clamped to
        the new domain) and restarts best tracking, since values of
        different functions are not comparable. A new n grows or shrinks
        the population without touching generation or best.

        Raises:
            UnknownFunctionKey: function_key is not a built-in
            InvalidParameter: bad value or unknown parameter name
        """
        new = SwarmParams.merged(self.params, **params)
        prev = self.params
        self.params = new

        if new.function_key != prev.function_key:
            self.objective = lookup(new.function_key)
            for firefly in self.fireflies:
                firefly.objective = self.objective
                firefly.clamp_to_domain(self.domain)
                firefly.evaluate()
            self.best = None
            self.update_best()

        if new.n != len(self.fireflies):
            self._adjust_population(new.n)

    def get_params(self):
        p = self.params.model_dump()
        p["function_key"] = self.params.function_key.value
        return p

    @classmethod
    def get_slider_defs(cls):
        """Return list of slider definitions for a control panel."""
        return [dict(d) for d in SLIDER_DEFS]

    # ── Read-only views ───────────────────────────────────────────────

    def get_stats(self):
        """Generation and best-ever solution, or None before any best exists."""
        if self.best is None:
            return None
        return {
            "generation": self.generation,
            "best_value": self.best.value,
            "best_x": self.best.x,
            "best_y": self.best.y,
            "population_size": len(self.fireflies),
        }

    @property
    def stats(self):
        return self.get_stats()

    def clear_trails(self):
        for firefly in self.fireflies:
            firefly.clear_trail()

    def positions(self):
        """(n, 2) array of positions in population order."""
        if not self.fireflies:
            return np.empty((0, 2))
        return np.array([f.position for f in self.fireflies], dtype=np.float64)

    def values(self):
        return np.array([f.value for f in self.fireflies], dtype=np.float64)

    def intensities(self):
        return np.array([f.intensity for f in self.fireflies], dtype=np.float64)

    def normalized_brightness(self):
        """Per-firefly brightness in [0, 1] relative to the current population.

        1.0 is the lowest value. When every value is equal the range falls
        back to 1 so nothing divides by zero.
        """
        values = self.values()
        if values.size == 0:
            return values
        lo = values.min()
        value_range = values.max() - lo
        if not value_range:
            value_range = 1.0
        return 1.0 - (values - lo) / value_range

    def best_agent(self):
        """The live firefly the best snapshot was taken from, if it still exists."""
        if self.best is None:
            return None
        for firefly in self.fireflies:
            if firefly.agent_id == self.best.agent_id:
                return firefly
        return None

    def flash_pairs(self, threshold=0.3):
        """Index pairs (i, j), i < j, of fireflies both flashing above threshold."""
        lit = [i for i, f in enumerate(self.fireflies) if f.intensity > threshold]
        return [(a, b) for k, a in enumerate(lit) for b in lit[k + 1:]]
