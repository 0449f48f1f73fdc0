"""Shared test fixtures for project-metrics tests."""

import posixpath

import pytest

from project_metrics.models import Dependency, ModuleReport, ModuleSystem


@pytest.fixture
def flavor():
    """POSIX path rules, so tests behave the same on every platform."""
    return posixpath


@pytest.fixture
def make_report():
    """Factory: make_report("/proj/a.js", "./b", cjs=["./c"], loc=10)."""

    def _make(path, *imports, cjs=(), **metrics):
        dependencies = [Dependency(spec) for spec in imports]
        dependencies += [Dependency(spec, ModuleSystem.REQUIRE_TIME) for spec in cjs]
        return ModuleReport(path=path, dependencies=dependencies, **metrics)

    return _make


@pytest.fixture
def chain_reports(make_report):
    """a -> b -> c, with no direct a -> c edge (listed out of order)."""
    return [
        make_report("/proj/c.js"),
        make_report("/proj/a.js", "./b"),
        make_report("/proj/b.js", "./c"),
    ]


@pytest.fixture
def star_reports(make_report):
    """hub depends on four leaves."""
    return [
        make_report("/proj/hub.js", "./l1", "./l2", "./l3", "./l4"),
        make_report("/proj/l1.js"),
        make_report("/proj/l2.js"),
        make_report("/proj/l3.js"),
        make_report("/proj/l4.js"),
    ]


@pytest.fixture
def chain_document():
    """escomplex-style result document for the a -> b -> c chain."""
    return {
        "reports": [
            {
                "path": "/proj/b.js",
                "dependencies": [{"path": "./c", "type": "cjs", "line": 1}],
                "loc": 20,
                "cyclomatic": 2,
                "effort": 300.0,
                "params": 1,
                "maintainability": 120.0,
            },
            {
                "path": "/proj/a.js",
                "dependencies": [{"path": "./b.js", "type": "esm", "line": 3}],
                "loc": 10,
                "cyclomatic": 1,
                "effort": 100.0,
                "params": 0,
                "maintainability": 140.0,
                "aggregate": {"sloc": {"logical": 4}},
            },
            {
                "path": "/proj/c.js",
                "dependencies": [{"path": "lodash", "type": "cjs", "line": 1}],
                "loc": 30,
                "cyclomatic": 3,
                "effort": 500.0,
                "params": 2,
                "maintainability": 100.0,
            },
        ],
        "errors": [],
    }
