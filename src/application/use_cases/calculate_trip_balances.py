"""Use case to compute balances and settlements for a trip."""

from src.application.ports.expense_source import ExpenseSourcePort
from src.domain.errors import ExpenseCalculationError, InconsistentBalancesError
from src.domain.models import BalanceCalculationResult
from src.domain.services.balances import calculate_balances
from src.infrastructure.logging.logger import get_app_logger


class CalculateTripBalancesUseCase:
    """Compute balances and an optimized settlement plan for a trip."""

    def __init__(
        self,
        expense_source: ExpenseSourcePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            expense_source: Port providing the roster and expenses.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._expense_source = expense_source
        self._logger = logger or get_app_logger()

    def execute(self, trip_id: str) -> BalanceCalculationResult:
        """Return balances, debts and settlements for ``trip_id``.

        Args:
            trip_id: Identifier of the trip to settle.

        Returns:
            BalanceCalculationResult: Full calculation result.

        Raises:
            ExpenseCalculationError: If an expense split is malformed.
            InconsistentBalancesError: If the engine self-check fails.
        """
        participants = self._expense_source.fetch_participants(trip_id)
        expenses = self._expense_source.fetch_expenses(trip_id)
        self._logger.info(
            f"Fetched {len(expenses)} expenses and {len(participants)} "
            f"participants for trip {trip_id}"
        )

        try:
            result = calculate_balances(
                expenses,
                participants,
                logger=self._logger,
            )
        except ExpenseCalculationError as exc:
            self._logger.error(
                f"Cannot settle trip {trip_id}: expense {exc.expense_id} "
                f"is invalid: {exc.reason}"
            )
            raise
        except InconsistentBalancesError as exc:
            self._logger.critical(
                f"Balance self-check failed for trip {trip_id}: {exc}"
            )
            raise

        self._logger.info(
            f"Trip {trip_id} settled: total={result.total_expenses}, "
            f"settlements={result.summary.total_transactions}, "
            f"balanced={result.summary.is_balanced}"
        )
        return result


__all__ = ["CalculateTripBalancesUseCase"]
