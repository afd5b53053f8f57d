"""
Statistics aggregation for parsed ping output
"""

import math
from typing import Optional

from .models import PingResponse


# Fields rendered as fixed-precision text in the final result
SUMMARY_FIELDS = ('min', 'avg', 'max', 'stddev', 'packet_loss')
PRECISION = 3


class StatisticsAggregator:
    """
    Turn accumulated samples and footer values into the final result.

    Computes:
    - Liveness (at least one sample collected)
    - First response time
    - Standard deviation, when the platform footer did not report one
    - Fixed 3-decimal text for the summary fields
    """

    def __init__(self, precision: int = PRECISION):
        self.precision = precision

    def aggregate(self, response: PingResponse, times: list[float]) -> PingResponse:
        """
        Fill derived fields of response in place.

        Args:
            response: Record holding whatever the footer handlers set
            times: Samples in arrival order

        Returns:
            The same record
        """
        response.alive = len(times) > 0

        if response.alive:
            response.time = times[0]
            response.times = list(times)

        if response.alive and response.stddev is None:
            response.stddev = self.stddev(times, response.avg)

        for key in SUMMARY_FIELDS:
            value = getattr(response, key)
            if isinstance(value, (int, float)):
                setattr(response, key, self._format(value))

        return response

    def stddev(self, times: list[float], mean: float) -> Optional[float]:
        """
        Population standard deviation of times around mean.

        The mean is the one reported by the footer, not one recomputed
        from the samples.
        """
        if not times:
            return None

        variance = sum((t - mean) ** 2 for t in times) / len(times)
        return round(math.sqrt(variance), self.precision)

    def _format(self, value: float) -> str:
        return f"{value:.{self.precision}f}"
