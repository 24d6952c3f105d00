class EmojiGeneratorError(RuntimeError):
    stage = "generate"


class FetchError(EmojiGeneratorError):
    stage = "fetch"


class ParseError(EmojiGeneratorError):
    stage = "parse"


class DecodeError(EmojiGeneratorError):
    stage = "decode"


class WriteError(EmojiGeneratorError):
    stage = "write"
