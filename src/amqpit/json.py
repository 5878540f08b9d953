""" JSON encoding for the expected-count documents and the reported values.
    :func:`dumps` returns bytes, :func:`loads` accepts bytes or str, and
    dictionary order survives in both directions.
"""

try:
    import msgspec.json
except ImportError:
    import orjson

    dumps = orjson.dumps
    loads = orjson.loads
    DecodeError = orjson.JSONDecodeError
else:
    dumps = msgspec.json.Encoder().encode
    loads = msgspec.json.Decoder().decode
    DecodeError = msgspec.DecodeError

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
