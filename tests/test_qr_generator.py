"""
Tests for the QR code generator.
"""

import pytest

from termtools.core.qr_generator import DEFAULT_BORDER, build_qr, qr_matrix, render_qr


class TestQrMatrix:

    def test_short_text_uses_version_one(self):
        qr = build_qr('hello')
        assert qr.version == 1

        matrix = qr_matrix('hello')
        size = 21 + 2 * DEFAULT_BORDER
        assert len(matrix) == size
        assert all(len(row) == size for row in matrix)

    def test_quiet_zone_is_light(self):
        matrix = qr_matrix('hello')
        assert not any(matrix[0])
        assert not any(row[0] for row in matrix)

    def test_finder_pattern_corner_is_dark(self):
        matrix = qr_matrix('hello')
        assert matrix[DEFAULT_BORDER][DEFAULT_BORDER] is True

    def test_longer_text_grows_the_code(self):
        assert len(qr_matrix('x' * 200)) > len(qr_matrix('hello'))

    def test_empty_text(self):
        with pytest.raises(ValueError, match='Nothing to encode'):
            build_qr('')

    def test_text_too_long(self):
        with pytest.raises(ValueError, match='too long'):
            build_qr('x' * 5000)


class TestRenderQr:

    def test_two_module_rows_per_line(self):
        size = len(qr_matrix('hello'))
        lines = render_qr('hello').splitlines()
        assert len(lines) == (size + 1) // 2
        assert all(len(line) == size for line in lines)

    def test_invert_swaps_glyphs(self):
        normal = render_qr('hello')
        inverted = render_qr('hello', invert=True)
        assert normal != inverted
        assert '█' in normal
