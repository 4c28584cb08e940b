import pytest

from hdfskit.hadoopconf import HadoopConf
from hdfskit.options import (
    ClientOptions,
    DataTransferProtection,
    OptionsError,
    client_options_from_conf,
)


class _Credentialed:
    credentials = object()


def test_addresses_from_conf():
    conf = HadoopConf({"fs.defaultFS": "hdfs://namenode3:8020"})
    assert client_options_from_conf(conf).addresses == ["namenode3:8020"]


def test_empty_conf_defaults():
    options = client_options_from_conf(None)
    assert options.addresses == []
    assert options.use_datanode_hostname is False
    assert options.kerberos_client is None
    assert options.data_transfer_protection is None


def test_use_datanode_hostname():
    options = client_options_from_conf({"dfs.client.use.datanode.hostname": "true"})
    assert options.use_datanode_hostname is True


def test_kerberos_principal_realm_is_dropped():
    options = client_options_from_conf(
        {"dfs.namenode.kerberos.principal": "nn/_HOST@EXAMPLE.COM"}
    )
    assert options.kerberos_service_principal_name == "nn/_HOST"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("authentication", DataTransferProtection.AUTHENTICATION),
        ("integrity,authentication", DataTransferProtection.INTEGRITY),
        ("Authentication,PRIVACY,integrity", DataTransferProtection.PRIVACY),
        ("bogus", None),
    ],
)
def test_highest_data_transfer_protection_wins(value, expected):
    options = client_options_from_conf({"dfs.data.transfer.protection": value})
    assert options.data_transfer_protection == expected


def test_encrypt_data_transfer_forces_privacy():
    options = client_options_from_conf(
        {
            "dfs.data.transfer.protection": "authentication",
            "dfs.encrypt.data.transfer": "TRUE",
        }
    )
    assert options.data_transfer_protection is DataTransferProtection.PRIVACY


def test_kerberos_placeholder_fails_validation():
    options = client_options_from_conf(
        {
            "hadoop.security.authentication": "Kerberos",
            "dfs.namenode.kerberos.principal": "nn/_HOST@EXAMPLE.COM",
        }
    )
    with pytest.raises(OptionsError, match="missing credentials"):
        options.validate()


def test_kerberos_without_spn_fails_validation():
    options = ClientOptions(addresses=["nn:8020"], kerberos_client=_Credentialed())
    with pytest.raises(OptionsError, match="SPN is not provided"):
        options.validate()


def test_validate_passes_when_complete():
    options = ClientOptions(
        addresses=["nn:8020"],
        kerberos_client=_Credentialed(),
        kerberos_service_principal_name="nn/_HOST",
    )
    options.validate()
    assert options.kerberos_service_principal_name == "nn/_HOST"


@pytest.mark.parametrize("value", ["authentication", "integrity", "privacy"])
def test_protection_value_matches_configured_string(value):
    options = client_options_from_conf({"dfs.data.transfer.protection": value})
    assert options.data_transfer_protection.value == value