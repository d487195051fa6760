"""
Tests for Base64 and number base conversion.
"""

import pytest

from termtools.core.encoders import b64_decode, b64_encode, convert_all, convert_base, parse_number


class TestBase64:

    def test_encode(self):
        assert b64_encode('hello') == 'aGVsbG8='
        assert b64_encode('') == ''

    def test_decode(self):
        assert b64_decode('aGVsbG8=') == 'hello'
        assert b64_decode('  aGVsbG8=\n') == 'hello'

    def test_unicode(self):
        assert b64_decode(b64_encode('pässwörd')) == 'pässwörd'

    @pytest.mark.parametrize('text', ['not base64!', 'aGVsbG8', '@@@@'])
    def test_invalid_input(self, text):
        with pytest.raises(ValueError, match='not a valid base64'):
            b64_decode(text)


class TestNumberBase:

    @pytest.mark.parametrize(
        'value, base_from, base_to, expected',
        [
            ('255', 10, 16, 'FF'),
            ('255', 10, 2, '11111111'),
            ('ff', 16, 10, '255'),
            ('0x1F', 16, 2, '11111'),
            ('0b1010', 2, 10, '10'),
            ('777', 8, 16, '1FF'),
            ('-255', 10, 16, '-FF'),
            ('1_000', 10, 10, '1000'),
            ('0', 10, 2, '0'),
        ],
    )
    def test_convert_base(self, value, base_from, base_to, expected):
        assert convert_base(value, base_from, base_to) == expected

    def test_convert_all(self):
        assert convert_all('10', 10) == {2: '1010', 8: '12', 10: '10', 16: 'A'}

    @pytest.mark.parametrize('value, base', [('12', 2), ('9', 8), ('xyz', 16), ('', 10), ('--5', 10)])
    def test_invalid_digits(self, value, base):
        with pytest.raises(ValueError):
            parse_number(value, base)

    def test_unsupported_base(self):
        with pytest.raises(ValueError, match='Unsupported base'):
            convert_base('10', 3, 10)
        with pytest.raises(ValueError, match='Unsupported base'):
            convert_base('10', 10, 36)
