"""CLI tests focused on argument parsing, dispatch and exit codes.

Dispatch tests stub subcommand functions and log setup; the generate tests
run the real pipeline against a temporary output directory.
"""

from __future__ import annotations

import builtins as py_builtins
import importlib
import logging
from argparse import Namespace
from io import StringIO
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest


def _invoke_main(argv: list[str], *, stub_subcommand: bool = False):
    """Invoke netinsight.cli.main with patches applied.

    Args:
        argv: Arguments excluding program name.
        stub_subcommand: If True, replaces subcommands (list/generate/info)
            with a function that records it was called.

    Returns:
        Namespace with: code (int), stdout (str), called (str|None), level (int|None).
    """
    import netinsight.cli as cli

    importlib.reload(cli)

    called: dict[str, bool] = {"list": False, "generate": False, "info": False}
    level_holder: dict[str, int | None] = {"level": None}

    patchers = [
        patch(
            "netinsight.log_config.set_global_log_level",
            side_effect=lambda lvl: level_holder.__setitem__("level", lvl),
        )
    ]

    if stub_subcommand:
        for name in called:
            patchers.append(
                patch.object(
                    cli,
                    f"{name}_command",
                    side_effect=lambda a, name=name: called.__setitem__(name, True),
                )
            )

    for p in patchers:
        p.start()

    out = SimpleNamespace(code=0, stdout="", called=None, level=None)
    saved_print = py_builtins.print
    try:
        with (
            patch("sys.stdout", new_callable=StringIO) as buf,
            patch("sys.argv", ["netinsight"] + argv),
        ):
            try:
                cli.main()
            except SystemExit as e:
                out.code = int(getattr(e, "code", 0) or 0)
            out.stdout = buf.getvalue()
            out.level = level_holder["level"]
            for name, was_called in called.items():
                if was_called:
                    out.called = name
                    break
    finally:
        # Restore global print in case --quiet modified it
        py_builtins.print = saved_print
        for p in reversed(patchers):
            p.stop()

    return out


def test_no_args_shows_help_and_exits_nonzero():
    res = _invoke_main([])
    assert res.code == 1
    assert "Available commands" in res.stdout


def test_verbose_flag_sets_debug_level_and_dispatches_info():
    res = _invoke_main(["-v", "info", "config.yml"], stub_subcommand=True)
    assert res.called == "info"
    assert res.level == logging.DEBUG


def test_default_log_level_is_info():
    res = _invoke_main(["info"], stub_subcommand=True)
    assert res.level == logging.INFO


def test_quiet_suppresses_print_output():
    res = _invoke_main(["--quiet", "list"])
    assert res.code == 0
    assert res.stdout == ""


def test_subcommand_dispatch_list_generate_info():
    for argv, expected in (
        (["list"], "list"),
        (["generate", "path_graph"], "generate"),
        (["info"], "info"),
    ):
        res = _invoke_main(argv, stub_subcommand=True)
        assert res.called == expected


def test_timer_context_manager_success_and_error():
    from netinsight.cli import Timer

    with patch("sys.stdout", new_callable=StringIO) as buf:
        with Timer("Unit test op"):
            pass
        assert "Unit test op" in buf.getvalue()

    with patch("sys.stdout", new_callable=StringIO) as buf:
        with pytest.raises(RuntimeError):
            with Timer("Failing op"):
                raise RuntimeError("boom")
        assert "failed after" in buf.getvalue()


def test__load_config_file_not_found_exits_with_code_2(tmp_path):
    from netinsight.cli import _load_config

    with patch("sys.stdout", new_callable=StringIO):
        with pytest.raises(SystemExit) as exc:
            _load_config(tmp_path / "does_not_exist.yml")
    assert exc.value.code == 2


def test__load_config_invalid_yaml_exits_with_code_2(invalid_config_file):
    from netinsight.cli import _load_config

    with patch("sys.stdout", new_callable=StringIO):
        with pytest.raises(SystemExit) as exc:
            _load_config(invalid_config_file)
    assert exc.value.code == 2


def test__load_config_without_path_returns_defaults():
    from netinsight.cli import _load_config
    from netinsight.config import StudioConfig

    assert _load_config(None) == StudioConfig()


def test__parse_param_pairs():
    from netinsight.cli import _parse_param_pairs
    from netinsight.errors import InvalidParameterError

    assert _parse_param_pairs(["nodeCount=20", " probability = 0.1 "]) == {
        "nodeCount": "20",
        "probability": "0.1",
    }
    assert _parse_param_pairs(None) == {}
    with pytest.raises(InvalidParameterError):
        _parse_param_pairs(["nodeCount"])


def test_list_command_prints_every_topology():
    import netinsight.cli as cli
    from netinsight.topologies import topology_names

    with patch("sys.stdout", new_callable=StringIO) as buf:
        cli.list_command(Namespace())
    out = buf.getvalue()
    for name in topology_names():
        assert name in out
    assert "rewiring_probability" in out


def test_generate_writes_both_csv_files(tmp_path: Path):
    res = _invoke_main(
        ["generate", "path_graph", "-p", "nodeCount=3", "-o", str(tmp_path)]
    )
    assert res.code == 0
    assert "3 nodes, 2 edges" in res.stdout
    listing = (tmp_path / "graph_adjacency_list.csv").read_text()
    matrix = (tmp_path / "graph_adjacency_matrix.csv").read_text()
    assert listing == "Node,Connected Nodes\n1,2\n2,1;3\n3,2\n"
    assert matrix == ",1,2,3\n1,0,1,0\n2,1,0,1\n3,0,1,0\n"


def test_generate_uses_config_filenames_and_defaults(tmp_path: Path, temp_config_file):
    out_dir = tmp_path / "out"
    res = _invoke_main(
        [
            "generate",
            "star_graph",
            "-c",
            str(temp_config_file),
            "-f",
            "list",
            "-o",
            str(out_dir),
            "--histogram",
        ]
    )
    assert res.code == 0
    # nodeCount comes from generation.defaults in the config file
    lines = (out_dir / "list.csv").read_text().splitlines()
    assert len(lines) == 1 + 20
    assert not (out_dir / "matrix.csv").exists()
    assert (out_dir / "hist.png").exists()


def test_generate_print_writes_to_stdout(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    res = _invoke_main(
        ["generate", "cycle_graph", "-p", "nodeCount=3", "-f", "matrix", "--print"]
    )
    assert res.code == 0
    assert "ADJACENCY MATRIX" in res.stdout
    assert ",1,2,3\n1,0,1,1\n" in res.stdout
    assert list(tmp_path.iterdir()) == []


def test_generate_seed_is_reproducible(tmp_path: Path):
    for name in ("a", "b"):
        _invoke_main(
            [
                "generate",
                "erdos_renyi_graph",
                "-p",
                "nodeCount=15",
                "--seed",
                "11",
                "-o",
                str(tmp_path / name),
            ]
        )
    assert (tmp_path / "a" / "graph_adjacency_list.csv").read_text() == (
        tmp_path / "b" / "graph_adjacency_list.csv"
    ).read_text()


@pytest.mark.parametrize(
    "argv",
    [
        ["generate", "ladder_graph", "-p", "nodeCount=7"],
        ["generate", "moebius_graph"],
        ["generate", "path_graph", "-p", "nodeCount"],
        ["generate", "path_graph", "-p", "nodeCount=lots"],
    ],
)
def test_generate_invalid_request_exits_with_code_3(argv, tmp_path: Path):
    res = _invoke_main(argv + ["-o", str(tmp_path)])
    assert res.code == 3
    assert list(tmp_path.iterdir()) == []


def test_generate_runtime_failure_exits_with_code_1(tmp_path: Path):
    import netinsight.cli as cli

    importlib.reload(cli)
    args = Namespace(
        topology="path_graph",
        config=None,
        param=["nodeCount=3"],
        seed=None,
        format="list",
        output=str(tmp_path),
        histogram=False,
        print=False,
    )
    with (
        patch("netinsight.export.write_csv", side_effect=OSError("disk full")),
        patch("sys.stdout", new_callable=StringIO),
    ):
        with pytest.raises(SystemExit) as exc:
            cli.generate_command(args)
    assert exc.value.code == 1


def test_info_command_prints_summary(temp_config_file):
    import netinsight.cli as cli

    importlib.reload(cli)
    with patch("sys.stdout", new_callable=StringIO) as buf:
        cli.info_command(Namespace(config=str(temp_config_file)))
    out = buf.getvalue()
    assert "NETWORK INSIGHT STUDIO CONFIGURATION" in out
    assert "list.csv" in out
