import pytest

from netcrypt.crc import checksum, encode, has_error, main, xor_division

DATA = "1101011011"
GENERATOR = "10011"


def test_known_checksum():
    assert checksum(DATA, GENERATOR) == "1110"


def test_encode_appends_checksum():
    assert encode(DATA, GENERATOR) == DATA + checksum(DATA, GENERATOR)
    assert len(checksum(DATA, GENERATOR)) == len(GENERATOR) - 1


def test_single_bit_generator_gives_empty_checksum():
    assert checksum("1011", "1") == ""


def test_encoded_message_has_no_error():
    assert has_error(encode(DATA, GENERATOR), GENERATOR) is False


@pytest.mark.parametrize("position", range(len(DATA) + len(GENERATOR) - 1))
def test_single_bit_flip_detected(position):
    message = list(encode(DATA, GENERATOR))
    message[position] = "0" if message[position] == "1" else "1"
    assert has_error("".join(message), GENERATOR) is True


@pytest.mark.parametrize("data", ["1", "0000", "101010111", "1111111111111"])
def test_remainder_leading_bits_are_zero(data):
    padded = data + "0" * (len(GENERATOR) - 1)
    remainder = xor_division(padded, GENERATOR)
    assert len(remainder) == len(padded)
    assert set(remainder[: len(padded) - len(GENERATOR) + 1]) <= {"0"}


def test_xor_division_of_codeword_is_all_zero():
    codeword = encode(DATA, GENERATOR)
    assert set(xor_division(codeword, GENERATOR)) == {"0"}


@pytest.mark.parametrize("generator", ["", "0101", "10a1"])
def test_invalid_generator_rejected(generator):
    with pytest.raises(ValueError):
        checksum(DATA, generator)


def test_non_binary_data_rejected():
    with pytest.raises(ValueError):
        checksum("10201", GENERATOR)


def test_received_shorter_than_generator_rejected():
    with pytest.raises(ValueError):
        has_error("10", GENERATOR)


def test_main_clean_transmission(capsys):
    transmitted = encode(DATA, GENERATOR)
    assert main([DATA, GENERATOR, transmitted]) == 0
    out = capsys.readouterr().out
    assert f"Transmitted message: {transmitted}" in out
    assert "No error in transmission" in out


def test_main_detects_error(capsys):
    corrupted = "0" + encode(DATA, GENERATOR)[1:]
    assert main([DATA, GENERATOR, corrupted]) == 0
    assert "Error detected in transmission" in capsys.readouterr().out


def test_main_rejects_bad_generator(capsys):
    assert main([DATA, "0011", DATA]) == 1
    assert "error" in capsys.readouterr().err