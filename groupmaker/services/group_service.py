# groupmaker/services/group_service.py
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from groupmaker.config.settings import settings
from groupmaker.domain.errors import InfeasibleConstraintsError
from groupmaker.domain.grouping import GroupingOptions, partition_with_report, validate_feasibility
from groupmaker.domain.models import FeasibilityResult, Group
from groupmaker.services.roster_service import clean_pairs

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    groups: List[Group]
    warnings: List[str] = field(default_factory=list)
    swaps: int = 0


class GroupService:
    def __init__(self, max_swaps: int = None, seed: Optional[int] = None):
        self.max_swaps = settings.MAX_SWAPS_DEFAULT if max_swaps is None else max_swaps
        self.seed = settings.RANDOM_SEED if seed is None else seed

    def validate(self, names: List[str], together, group_size: int) -> FeasibilityResult:
        return validate_feasibility(list(names), clean_pairs(together), group_size)

    def generate(self, names: List[str], group_size: int, exceptions=(), together=(),
                 seed: Optional[int] = None) -> GenerateResult:
        """
        Validate the together constraints, then partition.
        Raises InfeasibleConstraintsError instead of partitioning an impossible set.
        """
        names = list(names)
        together = clean_pairs(together)
        exceptions = clean_pairs(exceptions)

        check = validate_feasibility(names, together, group_size)
        if not check.valid:
            logger.info("Rejected infeasible together constraints: %s", check.message)
            raise InfeasibleConstraintsError(check.message, check.largest_component, group_size)

        options = GroupingOptions(group_size=group_size, max_swaps=self.max_swaps,
                                  random_seed=self.seed if seed is None else seed)
        result = partition_with_report(names, options.group_size, exceptions, together,
                                       rng=options.make_rng(), max_swaps=options.max_swaps)
        return GenerateResult(
            groups=result.groups,
            warnings=list(result.report.warnings),
            swaps=result.report.swaps,
        )
