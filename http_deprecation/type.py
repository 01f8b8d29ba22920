from typing import AnyStr, Callable, Iterable, List, Tuple

from typing_extensions import Protocol

RawHeaderListType = List[Tuple[bytes, bytes]]
HeaderTupleIterType = Iterable[Tuple[AnyStr, AnyStr]]
AddNoteMethodType = Callable[..., None]


class HeaderSource(Protocol):
    """
    Headers that can only be looked up by name.
    """

    def get_all(self, name: str) -> List[str]: ...


class HttpResponseExchange(Protocol):
    def on(self, event: str, listener: Callable[..., None]) -> None: ...
