"""
Deprecation checks for thor HTTP client exchanges.

    client = thor.http.HttpClient()
    exchange = client.exchange()
    watcher = DeprecationWatcher(exchange)

    @thor.events.on(watcher)
    def deprecation(result):
        print("deprecated!", result.timestamp, result.deprecation_link)

    exchange.request_start(b"GET", b"http://example.com/", [])
    exchange.request_done([])

The watcher doesn't make requests itself; it only listens to an exchange
that the caller drives.
"""

from datetime import datetime
import logging
from typing import List, Optional

import thor

from http_deprecation.message import Deprecation, deprecation
from http_deprecation.speak import Note, NoteCollector
from http_deprecation.type import HttpResponseExchange, RawHeaderListType

log = logging.getLogger(__name__)


class DeprecationWatcher(thor.events.EventEmitter):
    """
    Watch an exchange's response for deprecation information.

    Emits "deprecation" with a Deprecation record when the response headers
    mark the resource as deprecated.
    """

    def __init__(self, exchange: HttpResponseExchange, now: datetime = None) -> None:
        thor.events.EventEmitter.__init__(self)
        self.now = now
        self.status_code: Optional[str] = None
        self.result: Optional[Deprecation] = None
        self.notes: List[Note] = []
        exchange.on("response_start", self.response_start)

    def __repr__(self) -> str:
        status = [self.__class__.__name__]
        if self.status_code:
            status.append(self.status_code)
        if self.result:
            status.append("deprecated")
        return f"<{' '.join(status)} at {id(self):#x}>"

    def response_start(
        self, status_code: bytes, status_phrase: bytes, res_hdrs: RawHeaderListType
    ) -> None:
        self.status_code = status_code.decode("ascii", "replace")
        collector = NoteCollector()
        self.result = deprecation(res_hdrs, collector, self.now)
        self.notes = collector.notes
        if self.result is not None:
            log.info("Response %s is deprecated: %r", self.status_code, self.result)
            self.emit("deprecation", self.result)
