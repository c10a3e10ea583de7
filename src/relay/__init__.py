from .clock import ServerClock
from .kinds import BROADCAST_KINDS, EnvelopeKind
from .codec import decode_frame, encode_error, encode_envelope
from .envelope import Dropped, Envelope, DropReason
from .dispatcher import DispatchResult, BroadcastDispatcher
from .simulation import TranscriptionSimulator

__all__ = [
    "BROADCAST_KINDS",
    "BroadcastDispatcher",
    "DispatchResult",
    "DropReason",
    "Dropped",
    "Envelope",
    "EnvelopeKind",
    "ServerClock",
    "TranscriptionSimulator",
    "decode_frame",
    "encode_envelope",
    "encode_error",
]
