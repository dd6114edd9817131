from .errors import MempassError, OptionsError, SourceError
from .options import Options, check_options
from .generator import Generator, generate
from .passphrase import harden
from .entropy import entropy

__all__ = (
    'MempassError', 'OptionsError', 'SourceError',
    'Options', 'check_options',
    'Generator', 'generate',
    'harden', 'entropy',
)
