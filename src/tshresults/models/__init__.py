from tshresults.models.conversion_config import ConversionConfig, load_configuration
from tshresults.models.record import PlayerRoundRecord, SlotKey
from tshresults.models.result import CanonicalResult
from tshresults.models.round_tally import RoundTally

__all__ = [
    "SlotKey",
    "PlayerRoundRecord",
    "CanonicalResult",
    "RoundTally",
    "ConversionConfig",
    "load_configuration",
]
