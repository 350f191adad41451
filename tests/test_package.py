"""Test package structure and imports."""

from pathlib import Path


def test_package_import():
    """Test that the netinsight package can be imported."""
    import netinsight

    assert hasattr(netinsight, "__version__")
    assert netinsight.__version__ == "0.1.0"


def test_main_module_import():
    """Test that netinsight.__main__ can be imported."""
    import netinsight.__main__

    assert netinsight.__main__


def test_cli_module_import():
    """Test that netinsight.cli can be imported."""
    import netinsight.cli

    assert hasattr(netinsight.cli, "main")
    assert callable(netinsight.cli.main)


def test_log_config_module_import():
    """Test that netinsight.log_config can be imported."""
    import netinsight.log_config

    assert callable(netinsight.log_config.get_logger)
    assert callable(netinsight.log_config.set_global_log_level)


def test_main_module_calls_cli():
    """Test that __main__ module calls cli.main()."""
    import netinsight.__main__

    main_file = Path(netinsight.__main__.__file__)
    content = main_file.read_text()

    assert "from netinsight.cli import main" in content
    assert "main()" in content


def test_public_api_exports():
    import netinsight

    for name in netinsight.__all__:
        assert hasattr(netinsight, name), name
