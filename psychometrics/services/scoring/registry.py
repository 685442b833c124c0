"""Registry of the scoring strategies.

This module maps instrument codes to the strategy that scores them and
creates strategy instances on demand.
"""

from typing import Dict, List, Optional, Type, Union

from psychometrics.services.answer_normalizer import AnswerNormalizer
from psychometrics.services.scoring.base import ScoringStrategy
from psychometrics.services.scoring.cfr import CFRScoringStrategy
from psychometrics.services.scoring.disc import DISCScoringStrategy
from psychometrics.services.scoring.ic import ICScoringStrategy
from psychometrics.services.scoring.sixteen_pf import SixteenPFScoringStrategy
from psychometrics.services.scoring.tac import TACScoringStrategy
from psychometrics.services.scoring.wonderlic import WonderlicScoringStrategy
from psychometrics.utils.constants import InstrumentCode
from psychometrics.utils.exceptions import UnknownInstrumentError
from psychometrics.utils.logger import get_engine_logger

logger = get_engine_logger()


class StrategyRegistry:
    """Registry of scoring strategy implementations."""

    # Strategy implementation per instrument
    _strategies: Dict[InstrumentCode, Type[ScoringStrategy]] = {
        InstrumentCode.TEST_16PF: SixteenPFScoringStrategy,
        InstrumentCode.TEST_CFR: CFRScoringStrategy,
        InstrumentCode.TEST_DISC: DISCScoringStrategy,
        InstrumentCode.TEST_IL: WonderlicScoringStrategy,
        InstrumentCode.TEST_IC: ICScoringStrategy,
        InstrumentCode.TEST_TAC: TACScoringStrategy,
    }

    @classmethod
    def resolve_code(cls, code: Union[str, InstrumentCode]) -> InstrumentCode:
        """Resolve an instrument code, case-insensitively.

        Args:
            code: Instrument enum or its string value

        Returns:
            InstrumentCode: Matching instrument

        Raises:
            UnknownInstrumentError: If the code names no instrument
        """
        try:
            return InstrumentCode.from_code(code)
        except ValueError as e:
            raise UnknownInstrumentError(code, cause=e) from e

    @classmethod
    def get_strategy_class(cls, code: Union[str, InstrumentCode]) -> Type[ScoringStrategy]:
        """Get the strategy class registered for an instrument.

        Raises:
            UnknownInstrumentError: If no strategy is registered for the code
        """
        instrument = cls.resolve_code(code)
        if instrument not in cls._strategies:
            raise UnknownInstrumentError(instrument.value)
        return cls._strategies[instrument]

    @classmethod
    def create_strategy(
        cls,
        code: Union[str, InstrumentCode],
        normalizer: Optional[AnswerNormalizer] = None
    ) -> ScoringStrategy:
        """Create a strategy instance for an instrument.

        Args:
            code: Instrument code
            normalizer: Answer normalizer handed to the strategy

        Returns:
            ScoringStrategy: New strategy instance

        Raises:
            UnknownInstrumentError: If no strategy is registered for the code
        """
        strategy_class = cls.get_strategy_class(code)
        return strategy_class(normalizer=normalizer)

    @classmethod
    def register(
        cls,
        code: Union[str, InstrumentCode],
        strategy_class: Type[ScoringStrategy]
    ) -> None:
        """Register a strategy for an instrument, replacing any previous one.

        Args:
            code: Instrument code
            strategy_class: Strategy implementation

        Raises:
            TypeError: If the class is not a ScoringStrategy
            UnknownInstrumentError: If the code names no instrument
        """
        if not (isinstance(strategy_class, type) and issubclass(strategy_class, ScoringStrategy)):
            raise TypeError(f"{strategy_class!r} is not a ScoringStrategy subclass")

        instrument = cls.resolve_code(code)
        cls._strategies[instrument] = strategy_class
        logger.info(
            f"Registered scoring strategy {strategy_class.__name__} for {instrument.value}"
        )

    @classmethod
    def unregister(cls, code: Union[str, InstrumentCode]) -> None:
        """Remove the strategy registered for an instrument, if any."""
        instrument = cls.resolve_code(code)
        cls._strategies.pop(instrument, None)

    @classmethod
    def get_supported_instruments(cls) -> List[InstrumentCode]:
        """Get the instruments with a registered strategy.

        Returns:
            List[InstrumentCode]: Supported instruments in declaration order
        """
        return [instrument for instrument in InstrumentCode if instrument in cls._strategies]


def get_strategy(
    code: Union[str, InstrumentCode],
    normalizer: Optional[AnswerNormalizer] = None
) -> ScoringStrategy:
    """Get a scoring strategy for an instrument.

    Args:
        code: Instrument enum or its string value, case-insensitive
        normalizer: Answer normalizer handed to the strategy

    Returns:
        ScoringStrategy: Strategy instance

    Raises:
        UnknownInstrumentError: If no strategy is registered for the code
    """
    return StrategyRegistry.create_strategy(code, normalizer=normalizer)


def register_strategy(
    code: Union[str, InstrumentCode],
    strategy_class: Type[ScoringStrategy]
) -> None:
    """Register a scoring strategy for an instrument.

    Args:
        code: Instrument enum or its string value
        strategy_class: Strategy implementation
    """
    StrategyRegistry.register(code, strategy_class)
