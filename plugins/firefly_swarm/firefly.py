"""
Firefly - One Agent of the Swarm

Each firefly carries two independent pieces of state:

- Optimization state: position, objective value and a short trail of
  past positions. Mutated by the swarm's discrete step().
- Flash state: a small timing machine (idle -> flashing -> idle) with
  gender-dependent cadence and female response flashes. Mutated by the
  swarm's continuous advance_time().

Brightness is the negated objective value, so lower values shine brighter.
All randomness comes from the numpy Generator passed in at construction.
"""

import copy
import math

MALE = "male"
FEMALE = "female"

MAX_TRAIL_LENGTH = 20

# Flash timing, all in milliseconds
INITIAL_PHASE_SPREAD = 6000.0
MALE_INTERVAL = (1500.0, 3000.0)
FEMALE_INTERVAL = (3000.0, 6000.0)
FLASH_DURATION = (150.0, 250.0)
RESPONSE_DELAY = (400.0, 600.0)
IMMINENT_FLASH_WINDOW = 500.0

ATTACK_FRACTION = 0.2  # share of the flash spent rising to full intensity
DECAY_RATE = 3.0

RESPONSE_INTENSITY = 0.5   # male intensity a female reacts to
RESPONSE_RANGE = 0.2       # fraction of the larger domain side


def _between(rng, bounds):
    lo, hi = bounds
    return lo + rng.random() * (hi - lo)


class Firefly:

    def __init__(self, x, y, objective, rng, agent_id=None):
        """
        Args:
            x, y: Starting position (assumed inside the objective's domain)
            objective: ObjectiveFunction used to evaluate positions
            rng: numpy.random.Generator for gender and flash timing draws
            agent_id: Stable identity, kept by clone()
        """
        self.x = float(x)
        self.y = float(y)
        self.objective = objective
        self.rng = rng
        self.agent_id = agent_id
        self.trail = []

        self.gender = MALE if rng.random() < 0.5 else FEMALE

        # Random offset so the population does not flash in unison
        self.phase = rng.random() * INITIAL_PHASE_SPREAD
        if self.gender == MALE:
            self.interval = _between(rng, MALE_INTERVAL)
        else:
            self.interval = _between(rng, FEMALE_INTERVAL)
        self.duration = _between(rng, FLASH_DURATION)
        self.is_flashing = False
        self.intensity = 0.0

        self.response_delay = 0.0
        self.is_responding = False

        self.evaluate()

    # ── Optimization ──────────────────────────────────────────────────

    def evaluate(self):
        """Recompute value and brightness at the current position."""
        self.value = float(self.objective(self.x, self.y))
        self.brightness = -self.value

    def distance_to(self, other):
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def move_towards(self, other, beta0, gamma, alpha, domain):
        """Move towards a brighter firefly.

        x += beta0 * exp(-gamma * r^2) * (x_j - x) + alpha * extent * (rand - 0.5)

        The noise is scaled by the domain extent on each axis so alpha
        means the same thing on every landscape.
        """
        self.add_trail_point()

        r = self.distance_to(other)
        beta = beta0 * math.exp(-gamma * r * r)

        dx = other.x - self.x
        dy = other.y - self.y
        self.x += beta * dx + alpha * domain.width * (self.rng.random() - 0.5)
        self.y += beta * dy + alpha * domain.height * (self.rng.random() - 0.5)

        self.clamp_to_domain(domain)
        self.evaluate()

    def random_walk(self, alpha, domain):
        """Noise-only move, used by the brightest firefly."""
        self.add_trail_point()

        self.x += alpha * domain.width * (self.rng.random() - 0.5)
        self.y += alpha * domain.height * (self.rng.random() - 0.5)

        self.clamp_to_domain(domain)
        self.evaluate()

    def clamp_to_domain(self, domain):
        self.x, self.y = domain.clamp(self.x, self.y)

    def add_trail_point(self):
        self.trail.append((self.x, self.y))
        if len(self.trail) > MAX_TRAIL_LENGTH:
            del self.trail[0]

    def clear_trail(self):
        self.trail = []

    # ── Flashing ──────────────────────────────────────────────────────

    def update_flash(self, dt):
        """Advance the flash timer by dt milliseconds.

        While a response is pending the natural phase is frozen; once the
        response delay runs out the firefly flashes immediately. The
        envelope rises linearly over the first 20% of the duration and
        decays exponentially over the rest.
        """
        if self.is_responding and self.response_delay > 0:
            self.response_delay -= dt
            if self.response_delay <= 0:
                self.is_flashing = True
                self.phase = 0.0
                self.response_delay = 0.0

        if not self.is_responding or self.response_delay <= 0:
            self.phase += dt
            if self.phase >= self.interval:
                self.is_flashing = True
                self.phase = 0.0

        if self.is_flashing:
            t = self.phase / self.duration
            if t < ATTACK_FRACTION:
                self.intensity = t / ATTACK_FRACTION
            elif t < 1.0:
                self.intensity = math.exp(-DECAY_RATE * (t - ATTACK_FRACTION))
            else:
                self.is_flashing = False
                self.intensity = 0.0
                self.is_responding = False

    def check_for_nearby_flash(self, fireflies, domain):
        """Arm a response flash if a bright male is flashing nearby.

        Only idle females react, and not when their own flash is due within
        IMMINENT_FLASH_WINDOW. The first qualifying male in population order
        wins.
        """
        if self.gender != FEMALE or self.is_flashing or self.is_responding:
            return
        if self.interval - self.phase < IMMINENT_FLASH_WINDOW:
            return

        response_distance = RESPONSE_RANGE * max(domain.width, domain.height)
        for other in fireflies:
            if other is self or other.gender != MALE:
                continue
            if other.intensity > RESPONSE_INTENSITY and \
                    self.distance_to(other) < response_distance:
                self.response_delay = _between(self.rng, RESPONSE_DELAY)
                self.is_responding = True
                return

    # ── Views ─────────────────────────────────────────────────────────

    @property
    def position(self):
        return (self.x, self.y)

    @property
    def is_male(self):
        return self.gender == MALE

    @property
    def is_female(self):
        return self.gender == FEMALE

    @property
    def flash_state(self):
        """One of "idle", "waiting" (response pending) or "flashing"."""
        if self.is_flashing:
            return "flashing"
        if self.is_responding and self.response_delay > 0:
            return "waiting"
        return "idle"

    def clone(self):
        """Independent snapshot. Shares the objective and rng, draws nothing."""
        f = copy.copy(self)
        f.trail = list(self.trail)
        return f

    def __repr__(self):
        return (f"Firefly(id={self.agent_id}, {self.gender}, "
                f"x={self.x:.4f}, y={self.y:.4f}, value={self.value:.6g})")
