from .fs import CollectorProtocol, DisplayPathResolverProtocol, MatcherProtocol, WalkerProtocol
from .readers import ReaderDispatcherProtocol
from .render import DividerProtocol, FormatterProtocol
from .transcoder import TranscoderProtocol

__all__ = [
    'CollectorProtocol',
    'DisplayPathResolverProtocol',
    'MatcherProtocol',
    'WalkerProtocol',
    'ReaderDispatcherProtocol',
    'DividerProtocol',
    'FormatterProtocol',
    'TranscoderProtocol',
]
