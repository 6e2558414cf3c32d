"""The ``transc`` template function: linguistic transcriptions from ASCII codes."""
from __future__ import annotations

import io
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Optional, Tuple, Type

from lingssg.core.exceptions import LingSsgError
from lingssg.core.functions import BOOL, STRING, ArgParser, Function, enum_arg, optional
from lingssg.core.linguinput import Display, DisplayFormat, Encoder, EncodingError


class TranscriptionError(LingSsgError):
    def __init__(self, error: EncodingError) -> None:
        super().__init__(f"Could not encode to unicode: {error}", context=error.context)


class TranscriptionType(Enum):
    GraphemicRaw = "GraphemicRaw"
    Graphemic = "Graphemic"
    Morphophonemic = "Morphophonemic"
    Phonemic = "Phonemic"
    Phonetic = "Phonetic"


# Encoder input written before and after the transcribed text.
DELIMITERS: Dict[TranscriptionType, Tuple[str, str]] = {
    TranscriptionType.GraphemicRaw: ("", ""),
    TranscriptionType.Graphemic: ("{<}", "{>}"),
    TranscriptionType.Morphophonemic: ("{//}", "{//}"),
    TranscriptionType.Phonemic: ("/", "/"),
    TranscriptionType.Phonetic: ("[", "]"),
}

TRANSC_TYPE = enum_arg("transc-type", TranscriptionType)


@dataclass(frozen=True)
class TranscArgs:
    input: str
    lang: Optional[str] = None
    ty: TranscriptionType = TranscriptionType.GraphemicRaw
    attested: bool = False


class TranscFunction(Function[TranscArgs]):
    """``transc(in, lg=None, ty=GraphemicRaw, att=false)``.

    Reconstructed (non-attested) forms are starred:

        {{ transc(in="h{e}l.o", ty=Phonemic) }}            -> */hɛl.o/
        {{ transc(in="h{e}l.o", ty=Phonetic, att=true) }}  -> [hɛl.o]
    """

    errors: ClassVar[Tuple[Type[BaseException], ...]] = (TranscriptionError,)

    @classmethod
    def parse_args(cls, parser: ArgParser) -> TranscArgs:
        input_text = parser.retrieve("in", STRING)
        ty = parser.retrieve_with_default("ty", TRANSC_TYPE, TranscriptionType.GraphemicRaw)
        lang = parser.retrieve_with_default("lg", optional(STRING), None)
        attested = parser.retrieve_with_default("att", BOOL, False)
        return TranscArgs(input=input_text, lang=lang, ty=ty, attested=attested)

    def call(self, args: TranscArgs) -> str:
        buf = io.StringIO()
        prefix, suffix = DELIMITERS[args.ty]
        try:
            encoder = Encoder(buf)
            if not args.attested:
                encoder.push("*")
            encoder.push_str(prefix)
            encoder.encode(Display(args.input), DisplayFormat())
            encoder.push_str(suffix)
            encoder.finish()
        except EncodingError as err:
            raise TranscriptionError(err) from err
        return buf.getvalue()

    def doc(self) -> str:
        return """{# linguistic transcriptions with unicode input #}
transc(
    {# input #}
    in:string,
    {# language code, if not agnostic #}
    lg:string?,
    {# transcription type:
        - GraphemicRaw / GraRaw  (default)
        - Graphemic
        - Phonemic
        - Phonetic
        - Morphophonemic / Morpho
    #}
    ty:string?,
    {# attested (true) or reconstructed (false)?
        default false
    #}
    att:bool?
) -> string"""


__all__ = [
    "TranscriptionError",
    "TranscriptionType",
    "TranscArgs",
    "TranscFunction",
    "DELIMITERS",
]
