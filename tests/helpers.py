import io

from BaseCodec import BaseEncoding

SEPARATORS = [",", "\n", ";;", ""]
INTERVALS = [3, 4, 5]


def insert_separators(text: str, separator: str, interval: int) -> str:
    return separator.join(text[i:i + interval] for i in range(0, len(text), interval))


def stream_encode(encoding: BaseEncoding, data: bytes, one_at_a_time: bool = False) -> str:
    sink = io.StringIO()
    with encoding.encoding_stream(sink, close_sink=False) as stream:
        if one_at_a_time:
            for i in range(len(data)):
                stream.write(data[i:i + 1])
        else:
            stream.write(data)
    return sink.getvalue()


def stream_decode(encoding: BaseEncoding, text: str) -> bytes:
    out = bytearray()
    with encoding.decoding_stream(io.StringIO(text)) as stream:
        while True:
            chunk = stream.read(1)
            if not chunk:
                break
            out += chunk
    return bytes(out)
