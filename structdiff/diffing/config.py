import operator

from ..log import CostModelError


class DiffConfig:
    """Set of costs/predicates to pass around"""

    def __init__(self, *, substitution_cost=2, indel_cost=1, compare=operator.__eq__):
        for label, cost in (("substitution_cost", substitution_cost),
                            ("indel_cost", indel_cost)):
            if not isinstance(cost, int) or isinstance(cost, bool):
                raise CostModelError(
                    "%s must be an int, got %r" % (label, cost))
            if cost < 0:
                raise CostModelError(
                    "%s must be non-negative, got %r" % (label, cost))
        if substitution_cost > 2 * indel_cost:
            # Unequal elements would then never be paired up
            raise CostModelError(
                "substitution_cost (%d) must not exceed twice the indel_cost (%d)" % (
                    substitution_cost, indel_cost))
        if not callable(compare):
            raise CostModelError("compare must be callable, got %r" % (compare,))

        self.substitution_cost = substitution_cost
        self.indel_cost = indel_cost
        self.compare = compare

    @classmethod
    def from_config(cls, config, **kwargs):
        "Create from the flat dict returned by structdiff.config.build_config."
        for key in ("substitution_cost", "indel_cost"):
            if key in config and key not in kwargs:
                kwargs[key] = config[key]
        return cls(**kwargs)

    def __copy__(self):
        return DiffConfig(
            substitution_cost=self.substitution_cost,
            indel_cost=self.indel_cost,
            compare=self.compare,
        )

    def __repr__(self):
        return "DiffConfig(substitution_cost=%d, indel_cost=%d)" % (
            self.substitution_cost, self.indel_cost)
