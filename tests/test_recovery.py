import pytest

from geffe.recovery import RegisterRecovery

L1_TEMPLATE = (
    "100000101010101100000100011110000010001100100000111011010001001010101101110001100100"
    "000100010110011101000010001010110110010000110000110101010110000001111100110100011111"
    "001101101000100111100101111011111101010001001100100001010110110101111001011000110000"
    "111011"
)
L2_TEMPLATE = (
    "100000101010101100000100011110000010001100100000111011010001001010101101110001100100"
    "000100010110011101000010001010110110010000110000110101010110000001111100110100011111"
    "001101101000100111100101111011111101010001001100100001010110110101111001011000110000"
    "1110110101000"
)
GAMMA_320 = (
    "10000010101010110000010001111000001000110010000011101101000100101010110111000110"
    "01000001000101100111010000100010101101100100001100001101010101100000011111001101"
    "00011111001101101000100111100101111011111101010001001100100001010110110101111001"
    "01100011000011101101010000100100101100110111011111011100101101000001110011110111"
)
L1_KEY, L2_KEY, L3_KEY = 806014269, 55649069, 2352825186


def _prepared(alpha, beta, template):
    recovery = RegisterRecovery(alpha, beta)
    recovery.set_critical_set()
    recovery.set_gamma_template(template)
    return recovery


def _pack(sequence):
    return sum(1 << i for i, c in enumerate(sequence) if c == "1")


def test_l1_population_matches_template():
    recovery = _prepared(2.336, 6.009, L1_TEMPLATE)
    assert recovery.population == len(L1_TEMPLATE)
    assert recovery.population * 0.25 < recovery.criterion < recovery.population * 0.5


def test_l2_population_matches_template():
    recovery = _prepared(2.336, 6.121, L2_TEMPLATE)
    assert recovery.population == len(L2_TEMPLATE)


def test_l1_key_is_recognised():
    recovery = _prepared(2.336, 6.009, L1_TEMPLATE)
    assert recovery.recover_l1(L1_KEY, L1_KEY + 1) == [L1_KEY]
    assert recovery.l1_candidates == [L1_KEY]


def test_l2_key_is_recognised():
    recovery = _prepared(2.336, 6.121, L2_TEMPLATE)
    assert recovery.recover_l2(L2_KEY, L2_KEY + 1) == [L2_KEY]
    assert recovery.l2_candidates == [L2_KEY]


def test_zero_state_is_rejected():
    recovery = _prepared(2.336, 6.009, L1_TEMPLATE)
    assert recovery.recover_l1(0, 1) == []


def test_recognize_template_and_complement():
    recovery = _prepared(2.336, 6.009, L1_TEMPLATE)
    gamma = _pack(L1_TEMPLATE)
    assert recovery.recognize(gamma) is True
    complement = gamma ^ ((1 << len(L1_TEMPLATE)) - 1)
    assert recovery.recognize(complement) is False


def test_template_before_critical_set():
    with pytest.raises(RuntimeError):
        RegisterRecovery(2.336, 6.009).set_gamma_template(L1_TEMPLATE)


def test_set_quantiles_resets_critical_set():
    recovery = _prepared(2.336, 6.009, L1_TEMPLATE)
    recovery.set_quantiles(2.336, 6.121)
    with pytest.raises(RuntimeError):
        recovery.set_gamma_template(L2_TEMPLATE)
    recovery.set_critical_set()
    recovery.set_gamma_template(L2_TEMPLATE)
    assert recovery.population == len(L2_TEMPLATE)


def test_template_of_wrong_size():
    recovery = RegisterRecovery(2.336, 6.009)
    recovery.set_critical_set()
    with pytest.raises(ValueError, match="size"):
        recovery.set_gamma_template(L2_TEMPLATE)


def test_template_with_bad_characters():
    recovery = RegisterRecovery(2.336, 6.009)
    recovery.set_critical_set()
    bad = "2" + L1_TEMPLATE[1:]
    with pytest.raises(ValueError, match="Invalid template"):
        recovery.set_gamma_template(bad)


def test_recognize_without_template():
    with pytest.raises(RuntimeError):
        RegisterRecovery(2.336, 6.009).recognize(0)


def test_recover_without_template():
    recovery = RegisterRecovery(2.336, 6.009)
    recovery.set_critical_set()
    with pytest.raises(RuntimeError):
        recovery.recover_l1(0, 1)


@pytest.mark.parametrize("start, stop", [(5, 4), (-1, 3), (0, (1 << 30) + 1)])
def test_invalid_l1_range(start, stop):
    recovery = _prepared(2.336, 6.009, L1_TEMPLATE)
    with pytest.raises(ValueError):
        recovery.recover_l1(start, stop)


def test_full_template_bad_characters():
    with pytest.raises(ValueError):
        RegisterRecovery().set_full_gamma_template("0120")


def test_full_template_too_long():
    with pytest.raises(ValueError):
        RegisterRecovery().set_full_gamma_template("0" * 2049)


def test_recover_l3_without_full_template():
    with pytest.raises(RuntimeError):
        RegisterRecovery().recover_l3()


def test_recover_l3_finds_selector():
    recovery = RegisterRecovery()
    recovery.set_full_gamma_template(GAMMA_320)
    recovery.l1_candidates = [1, L1_KEY]
    recovery.l2_candidates = [L2_KEY]
    assert recovery.recover_l3() == [(L1_KEY, L2_KEY, L3_KEY)]


def test_recover_l3_no_candidates():
    recovery = RegisterRecovery()
    recovery.set_full_gamma_template(GAMMA_320)
    assert recovery.recover_l3() == []