"""
Blum, Blum y Shub: primos de Blum, modulo, semilla inicial y maquina de trits.
"""
import itertools
import logging
from fractions import Fraction

import pytest

from dicerng import (
    ConfigurationError,
    RNGContext,
    SeedingFailure,
    Variant,
    install_seed,
    report_seed,
    set_bbs_factors,
    set_bbs_modulus,
)
from dicerng.generators.bbs import (
    BBSGenerator,
    is_good_prime,
    is_probable_prime,
    next_good_prime,
    trit_from_bits,
)


def _bits(seq):
    it = iter(seq)
    return lambda: next(it)


def test_probable_prime():
    assert [n for n in range(40) if is_probable_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37]
    assert not is_probable_prime(561)  # Carmichael
    assert is_probable_prime(1000003)


def test_good_prime():
    assert is_good_prime(19)
    assert is_good_prime(23)
    assert is_good_prime(31)
    assert not is_good_prime(7)    # < 19
    assert not is_good_prime(29)   # 1 mod 4
    assert not is_good_prime(27)   # compuesto


def test_next_good_prime_always_advances():
    assert next_good_prime(4) == 19
    assert next_good_prime(19) == 23


def test_invalid_equal_factors_are_advanced_to_distinct_primes(caplog):
    ctx = RNGContext(Variant.BBS)
    with caplog.at_level(logging.WARNING):
        p, q = set_bbs_factors(ctx, "4", "4")
    assert (p, q) == (19, 23)
    assert ctx.generator(Variant.BBS).modulus == 19 * 23
    assert "invalid Blum factor" in caplog.text


def test_valid_factors_are_kept():
    ctx = RNGContext(Variant.BBS)
    assert set_bbs_factors(ctx, "19", "23") == (19, 23)


@pytest.mark.parametrize("bad", ["", "abc", "0", "-7", "12.5"])
def test_bad_modulus_rejected(bad):
    ctx = RNGContext(Variant.BBS)
    set_bbs_modulus(ctx, "437")
    with pytest.raises(ConfigurationError):
        set_bbs_modulus(ctx, bad)
    assert ctx.generator(Variant.BBS).modulus == 437


def test_seed_requires_modulus():
    ctx = RNGContext(Variant.MERSENNE)
    install_seed(ctx, 99)
    ctx.set_variant(Variant.BBS)
    with pytest.raises(ConfigurationError):
        install_seed(ctx, 7)
    assert ctx.seed == 99


def test_short_cycles_clamp_the_generator(caplog):
    ctx = RNGContext(Variant.BBS)
    set_bbs_modulus(ctx, "1")
    with caplog.at_level(logging.ERROR):
        with pytest.raises(SeedingFailure):
            install_seed(ctx, 5)
    gen = ctx.generator(Variant.BBS)
    assert gen.state == 0
    assert gen.degraded
    assert "Invalid seed and/or modulus" in caplog.text
    # las tiradas quedan rechazadas hasta resembrar
    with pytest.raises(SeedingFailure):
        ctx.roll()


def test_small_modulus_has_only_short_cycles():
    gen = BBSGenerator()
    gen.set_modulus(21)
    with pytest.raises(SeedingFailure):
        gen.seed(4)
    assert gen.degraded


def test_unseeded_generator_refuses_to_roll():
    gen = BBSGenerator()
    gen.set_modulus(437)
    with pytest.raises(SeedingFailure):
        gen.roll()


def test_zero_seed_is_a_failure():
    ctx = RNGContext(Variant.BBS)
    set_bbs_modulus(ctx, "437")
    with pytest.raises(SeedingFailure):
        install_seed(ctx, 0)


def test_good_seed_and_report():
    ctx = RNGContext(Variant.BBS)
    set_bbs_factors(ctx, "1000000", "2000000")
    install_seed(ctx, 12345)
    gen = ctx.generator(Variant.BBS)
    assert not gen.degraded
    assert 12345 <= gen.state < 12345 + 32
    text = report_seed(ctx)
    assert text.startswith("The current seed is ")
    assert f"the modulus is {gen.modulus}." in text


def test_roll_counts_calls():
    ctx = RNGContext(Variant.BBS)
    set_bbs_factors(ctx, "1000000", "2000000")
    install_seed(ctx, 777)
    for _ in range(5):
        ctx.roll()
    assert ctx.counter == 10


# --- maquina de trits ---

@pytest.mark.parametrize(
    "bits,trit",
    [
        ([0, 0], 0),
        ([1, 1], 2),
        ([0, 1, 1], 1),
        ([1, 0, 0], 1),
        ([0, 1, 0, 0], 0),
        ([1, 0, 1, 1], 2),
    ],
)
def test_trit_machine_paths(bits, trit):
    assert trit_from_bits(_bits(bits)) == trit


def test_trit_machine_consumes_only_what_it_needs():
    consumed = []

    def next_bit():
        consumed.append(1)
        return 1

    assert trit_from_bits(next_bit) == 2
    assert len(consumed) == 2


def test_trit_machine_is_exactly_uniform():
    """Suma exacta de probabilidad sobre todas las secuencias de 16 bits."""
    length = 16
    mass = {0: Fraction(0), 1: Fraction(0), 2: Fraction(0)}
    unfinished = Fraction(0)
    seen_prefixes = set()
    for seq in itertools.product((0, 1), repeat=length):
        used = []

        def next_bit():
            b = seq[len(used)]
            used.append(b)
            return b

        try:
            t = trit_from_bits(next_bit)
        except IndexError:
            unfinished += Fraction(1, 2 ** length)
            continue
        prefix = tuple(used)
        if prefix in seen_prefixes:
            continue
        seen_prefixes.add(prefix)
        mass[t] += Fraction(1, 2 ** len(prefix))

    assert mass[0] == mass[2]
    assert abs(mass[1] - mass[0]) <= unfinished
    assert unfinished <= Fraction(1, 2 ** (length - 1))
    assert sum(mass.values()) + unfinished == 1
