import logging
from typing import Any, Callable, Optional

import msgspec

from ._errors import EncodeError
from .objects import GEOJSON_TYPES, GeoJSON
from .position import Position

__all__ = ("Encoder", "to_text")

logger = logging.getLogger(__name__)


def __dir__():
    return __all__


class Encoder:
    """A GeoJSON encoder.

    Parameters
    ----------
    precision : int, optional
        The number of digits written after the decimal point of every
        coordinate. Coordinates are always written in fixed-point notation.
        Defaults to 6.
    indent : int, optional
        If set, the output is pretty-printed with this many spaces per level.
        By default the output is compact.
    enc_hook : callable, optional
        A callable to call for property values that aren't supported msgspec
        types. Takes the unsupported object and should return a supported
        object, or raise a TypeError. A TypeError or ValueError raised by the
        hook is re-raised as `EncodeError`.

    Examples
    --------
    >>> from geostruct import Position, point
    >>> Encoder(precision=2).encode(point(Position(1, 2)))
    b'{"type":"Point","coordinates":[1.00,2.00]}'
    """

    def __init__(
        self,
        *,
        precision: int = 6,
        indent: Optional[int] = None,
        enc_hook: Optional[Callable[[Any], Any]] = None,
    ):
        if isinstance(precision, bool) or not isinstance(precision, int):
            raise TypeError("precision must be an int")
        if precision < 0:
            raise ValueError("precision must be >= 0")
        self.precision = precision
        self.indent = indent
        self.enc_hook = enc_hook
        self._position_format = f"[%.{precision}f,%.{precision}f]"
        self._encoder = msgspec.json.Encoder(enc_hook=self._enc_hook)

    def _enc_hook(self, obj: Any) -> Any:
        if isinstance(obj, Position):
            return msgspec.Raw(
                self._position_format % (obj.longitude, obj.latitude)
            )
        if self.enc_hook is not None:
            return self.enc_hook(obj)
        raise TypeError(f"Encoding objects of type {type(obj).__name__} is unsupported")

    def encode(self, obj: GeoJSON) -> bytes:
        """Serialize a GeoJSON object as GeoJSON text.

        Parameters
        ----------
        obj : Geometry, Feature, or FeatureCollection
            The object to serialize.

        Returns
        -------
        data : bytes
            The serialized object.

        Raises
        ------
        TypeError
            If ``obj`` isn't a GeoJSON object.
        EncodeError
            If a value nested in ``obj`` can't be serialized.
        """
        if type(obj) not in GEOJSON_TYPES:
            raise TypeError(
                f"Expected a GeoJSON object, got `{type(obj).__name__}`"
            )
        try:
            buf = self._encoder.encode(obj)
        except (
            TypeError,
            ValueError,
            OverflowError,
            RecursionError,
            msgspec.EncodeError,
        ) as exc:
            logger.debug("Failed to encode %s object: %s", obj.type, exc)
            raise EncodeError(str(exc)) from exc
        if self.indent is not None:
            buf = msgspec.json.format(buf, indent=self.indent)
        return buf


_default_encoder = Encoder()


def to_text(obj: GeoJSON) -> bytes:
    """Serialize a GeoJSON object as compact GeoJSON text.

    Coordinates are written in fixed-point notation with six decimal digits.
    Use an `Encoder` to configure the output.

    Parameters
    ----------
    obj : Geometry, Feature, or FeatureCollection
        The object to serialize.

    Returns
    -------
    data : bytes
        The serialized object.

    Raises
    ------
    EncodeError
        If a value nested in ``obj`` can't be serialized.

    See Also
    --------
    Encoder
    """
    return _default_encoder.encode(obj)
