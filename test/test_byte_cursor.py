from ppm_codec.byte_cursor import ByteCursor


def test_reads_bytes_in_order_then_exhausts():
    cursor = ByteCursor(b"P6")
    assert cursor.next_byte() == ord("P")
    assert cursor.next_byte() == ord("6")
    assert cursor.next_byte() is None
    assert cursor.next_byte() is None
    assert cursor.position == 2


def test_empty_buffer_is_exhausted_immediately():
    cursor = ByteCursor(b"")
    assert cursor.next_byte() is None
    assert cursor.position == 0


def test_zero_byte_is_not_exhaustion():
    cursor = ByteCursor(bytes([0]))
    assert cursor.next_byte() == 0
    assert cursor.next_byte() is None
