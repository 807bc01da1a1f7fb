"""Tests for network and integration calculators."""

import pytest


class TestBacnetInstance:

    def test_packing(self, calc):
        result = calc("bacnet_instance", building="1", floor="1", device="1")
        assert result.value("instance") == "101001"
        assert result.value("in_range") == "Yes"

    def test_fractions_truncate(self, calc):
        result = calc("bacnet_instance", building="2.9", floor="3", device="45.5")
        assert result.value("instance") == "203045"

    def test_out_of_range_flagged_not_clamped(self, calc):
        result = calc("bacnet_instance", building="50", floor="0", device="0")
        assert result.value("instance") == "5000000"
        assert result.value("in_range") == "No (max 4194303)"

    def test_ceiling_is_in_range(self, calc):
        result = calc("bacnet_instance", building="41", floor="94", device="303")
        assert result.value("instance") == "4194303"
        assert result.value("in_range") == "Yes"

    def test_overflow_blanks_both(self, calc):
        assert calc("bacnet_instance", building="1e304", floor="1", device="1").is_blank

    def test_inexact_instance_blanks_both(self, calc):
        assert calc("bacnet_instance", building="1e20", floor="0", device="0").is_blank

    def test_largest_exact_instance_printed(self, calc):
        result = calc("bacnet_instance", building="0", floor="0", device=str(2 ** 53))
        assert result.value("instance") == "9007199254740992"
        assert result.value("in_range") == "No (max 4194303)"


class TestMstpTrunkLength:

    def test_derated_length(self, calc):
        result = calc("mstp_trunk_length", baud="76800", device_count="10")
        assert result.value("max_length") == "3280"

    def test_derating_floor(self, calc):
        result = calc("mstp_trunk_length", baud="9600", device_count="60")
        assert result.value("max_length") == "2000"

    def test_single_device_full_length(self, calc):
        result = calc("mstp_trunk_length", baud="38400", device_count="1")
        assert result.value("max_length") == "4000"

    def test_unknown_baud_blank(self, calc):
        result = calc("mstp_trunk_length", baud="115200", device_count="10")
        assert result.value("max_length") == ""


class TestTrendStorage:

    def test_storage(self, calc):
        result = calc("trend_storage", points="100", interval="5", retention="30")
        assert result.value("storage") == "16.5"

    def test_zero_interval_blank(self, calc):
        result = calc("trend_storage", points="100", interval="0", retention="30")
        assert result.value("storage") == ""


class TestIpSubnet:

    def test_class_c(self, calc):
        result = calc("ip_subnet", address="192.168.1.0", cidr="24")
        assert result.value("usable_hosts") == "254"
        assert result.value("host_range") == "192.168.1.1 - 192.168.1.254"
        assert result.value("network") == "192.168.1.0"
        assert result.value("broadcast") == "192.168.1.255"
        assert result.value("netmask") == "255.255.255.0"

    def test_host_address_is_masked(self, calc):
        result = calc("ip_subnet", address="10.20.30.40", cidr="16")
        assert result.value("network") == "10.20.0.0"
        assert result.value("usable_hosts") == "65,534"

    @pytest.mark.parametrize("cidr", ["31", "32"])
    def test_no_usable_hosts(self, calc, cidr):
        result = calc("ip_subnet", address="10.0.0.1", cidr=cidr)
        assert result.value("usable_hosts") == "0"
        assert result.value("host_range") == ""

    def test_zero_prefix(self, calc):
        result = calc("ip_subnet", address="10.0.0.1", cidr="0")
        assert result.value("usable_hosts") == "4,294,967,294"
        assert result.value("netmask") == "0.0.0.0"
        assert result.value("host_range") == "0.0.0.1 - 255.255.255.254"

    @pytest.mark.parametrize("address,cidr", [
        ("192.168.1", "24"),
        ("192.168.1.256", "24"),
        ("192.168.1.-1", "24"),
        ("a.b.c.d", "24"),
        ("192.168.1.0", "33"),
        ("192.168.1.0", "-1"),
    ])
    def test_invalid_blank(self, calc, address, cidr):
        assert calc("ip_subnet", address=address, cidr=cidr).is_blank
