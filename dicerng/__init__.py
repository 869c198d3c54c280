from dicerng.config import Config
from dicerng.context import RNGContext
from dicerng.diagnostics import describe_context, report_counter, report_seed
from dicerng.errors import (
    ConfigurationError,
    ContextClosed,
    DiceError,
    MalformedRoll,
    RemoteFailure,
    SeedingFailure,
    SourceExhausted,
)
from dicerng.seeding import (
    acquire_system_seed,
    install_seed,
    install_seed_extended,
    install_seed_text,
    open_dice_file,
    set_bbs_factors,
    set_bbs_modulus,
)
from dicerng.types import DicePair, Variant
