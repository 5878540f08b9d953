import json

import amqpit


def test_json_encode_and_decode():
    encode_and_decode(json.dumps, json.loads, dump_is_bytes=False)


def test_amqpit_encode_and_decode():
    encode_and_decode(amqpit.json.dumps, amqpit.json.loads)


def encode_and_decode(dumps, loads, dump_is_bytes=True):

    # The received values of a JMS test: subtype names in the order the
    # sender used, which is deliberately not alphabetical.

    input_dictionary = dict()
    input_dictionary['string'] = ['Hello, world!', '', 'Ω']
    input_dictionary['boolean'] = ['True', 'False']
    input_dictionary['bytes'] = ['\x00\x01\xff']
    input_dictionary['map'] = [{'key': ['nested', {'deeper': 'value'}]}]

    encoded = dumps(input_dictionary)

    if dump_is_bytes:
        assert isinstance(encoded, bytes)
    else:
        assert isinstance(encoded, str)

    # Whitespace handling differs between the JSON libraries, so compare
    # the decoded structure rather than the encoded text.

    decoded = loads(encoded)
    assert decoded == input_dictionary

    # Key order must survive the round trip; the expected-count documents
    # depend on it.

    assert list(decoded.keys()) == list(input_dictionary.keys())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
