from ._body import BodyCodec, EncodedBody, OutgoingBody, PassThroughBody
from ._decoder import ResponseDecoder
from ._dispatcher import Handle, RequestDispatcher
from ._executor import (
    Aborted,
    Attempt,
    AttemptExecutor,
    AttemptOutcome,
    HttpFailure,
    ResponseStream,
    Success,
    TransportFailure,
)
from ._headers import HeaderBuilder
from ._transport import HttpxTransport, Transport

__all__ = [
    "BodyCodec",
    "EncodedBody",
    "OutgoingBody",
    "PassThroughBody",
    "ResponseDecoder",
    "Handle",
    "RequestDispatcher",
    "Aborted",
    "Attempt",
    "AttemptExecutor",
    "AttemptOutcome",
    "HttpFailure",
    "ResponseStream",
    "Success",
    "TransportFailure",
    "HeaderBuilder",
    "HttpxTransport",
    "Transport",
]
