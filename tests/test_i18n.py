import pytest

from arbor.i18n import Localizer, load_catalog


def test_default_locale_is_english():
    localizer = Localizer()
    assert localizer.locale == "en"
    assert localizer.get("missing_option", label="-a/--abc") == "Required option -a/--abc is missing."


def test_attribute_access():
    localizer = Localizer()
    assert localizer.invalid_option(name="--x") == "Option --x is not valid."
    assert localizer.help_option_help() == "Shows this message."


@pytest.mark.parametrize("locale", ["it", "it_IT", "it-IT", "IT"])
def test_italian_locale(locale):
    localizer = Localizer(locale)
    assert localizer.locale == "it"
    assert localizer.missing_option(label="-a/--abc") == "L'opzione obbligatoria -a/--abc è mancante."


def test_unknown_locale_falls_back():
    localizer = Localizer("xx")
    assert localizer.locale == "en"

    localizer.set_locale("it")
    localizer.set_locale("zz")
    assert localizer.locale == "it"


def test_unknown_key():
    localizer = Localizer()
    with pytest.raises(KeyError):
        localizer.get("does_not_exist")
    with pytest.raises(AttributeError):
        localizer.does_not_exist


def test_catalogs_share_keys():
    assert set(load_catalog("en")) == set(load_catalog("it"))
