import pytest

from cipherbox.paths import (
    cxl_device_path,
    domain_bus_device,
    go_split,
    main,
    pci_root_path,
    trim_prefix,
)


def test_split_on_comma():
    assert go_split("a,b,c", ",") == ["a", "b", "c"]


def test_split_leading_separator_gives_empty_first_field():
    assert go_split("a man a plan a canal panama", "a ") == ["", "man ", "plan ", "canal panama"]


@pytest.mark.parametrize(
    "text, sep",
    [("a,b,c", ","), ("a man a plan a canal panama", "a "), ("card0", "card"), ("", "xy")],
)
def test_split_join_round_trip(text, sep):
    assert sep.join(go_split(text, sep)) == text


def test_split_empty_separator_splits_characters():
    parts = go_split(" xyz ", "")
    assert "".join(parts) == " xyz "
    assert len(parts) == len(" xyz ")
    assert all(len(part) == 1 for part in parts)


def test_split_empty_text_gives_one_empty_field():
    assert go_split("", "Bernardo O'Higgins") == [""]


def test_trim_prefix():
    result = trim_prefix("card0", "card")
    assert "card" + result == "card0"
    assert not result.startswith("card")


def test_trim_prefix_absent():
    assert trim_prefix("card0", "disk") == "card0"


def test_cxl_device_path():
    assert cxl_device_path("1") == "/dev/cxl/afu1.0m"


def test_domain_bus_device_drops_function():
    pci_id = "0003:01:00.0"
    result = domain_bus_device(pci_id)
    assert pci_id.startswith(result)
    assert len(result) == len(pci_id) - 2


def test_domain_bus_device_too_short():
    with pytest.raises(ValueError):
        domain_bus_device("1")


def test_pci_root_path():
    assert pci_root_path("0004:00:00.1") == "/sys/devices/pci0004:00"


def test_pci_root_path_too_short():
    with pytest.raises(ValueError):
        pci_root_path("123")


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert '["a" "b" "c"]' in out
    assert "/dev/cxl/afu1.0m" in out
    assert "Dev Path = /sys/devices/pci0004:00" in out