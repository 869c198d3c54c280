import pytest

from dicerng import ConfigurationError, RNGContext, Variant, describe_context, install_seed, report_counter, report_seed
from dicerng.diagnostics import NOT_APPLICABLE


class Entry:
    def read_dice(self):
        return 2, 3


@pytest.mark.parametrize("variant", [Variant.MANUAL, Variant.RANDOM_ORG])
def test_seed_not_applicable(variant):
    ctx = RNGContext(variant, manual=Entry(), remote=object())
    assert report_seed(ctx) == NOT_APPLICABLE


@pytest.mark.parametrize(
    "variant,text",
    [
        (Variant.ISAAC, "Number of calls since last seed: 2."),
        (Variant.MD5, "Number of calls since last seed: 2."),
        (Variant.MERSENNE, None),
    ],
)
def test_counter_phrasing(variant, text):
    ctx = RNGContext(variant)
    install_seed(ctx, 1)
    ctx.roll()
    assert report_counter(ctx) == text


def test_describe_context():
    ctx = RNGContext(Variant.ISAAC)
    install_seed(ctx, 9)
    info = describe_context(ctx)
    assert info["variant"] == "isaac"
    assert info["generator"] == "ISAAC"
    assert info["seed"] == "The current seed is 9."
    assert info["calls"] == 0
    assert info["dice_file"] is None


@pytest.mark.parametrize(
    "name,variant",
    [
        ("BBS", Variant.BBS),
        ("random.org", Variant.RANDOM_ORG),
        ("random_org", Variant.RANDOM_ORG),
        ("Twister", Variant.MERSENNE),
        ("mersenne", Variant.MERSENNE),
        ("file", Variant.FILE),
    ],
)
def test_variant_names(name, variant):
    assert Variant.from_name(name) is variant


def test_unknown_variant_name():
    with pytest.raises(ConfigurationError):
        Variant.from_name("loaded")


def test_display_metadata():
    assert Variant.BBS.display_name == "Blum, Blum and Shub"
    assert "random.org" in Variant.RANDOM_ORG.tooltip
    assert Variant.MD5.is_native and not Variant.FILE.is_native
