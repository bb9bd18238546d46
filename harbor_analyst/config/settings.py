"""Runtime settings for a report run.

Settings say *where* things are; ``analyst.yaml`` says *what* to report.

Usage
-----
>>> settings = AnalystSettings()
>>> settings.out_dir
PosixPath('out')

Or from environment variables:

>>> import os
>>> os.environ["HARBOR_ANALYST_OUT_DIR"] = "/tmp/report"
>>> AnalystSettings.from_env().out_dir
PosixPath('/tmp/report')

"""

from __future__ import annotations

import dataclasses as dc
import os
from pathlib import Path

SNAPSHOT_DIR_ENV = "HARBOR_ANALYST_SNAPSHOT_DIR"
CONFIG_PATH_ENV = "HARBOR_ANALYST_CONFIG"
OUT_DIR_ENV = "HARBOR_ANALYST_OUT_DIR"
LOG_LEVEL_ENV = "HARBOR_ANALYST_LOG_LEVEL"


@dc.dataclass(frozen=True, slots=True)
class AnalystSettings:
    """Locations and options for a report run.

    Attributes
    ----------
    snapshot_dir
        Directory holding ``project.csv``, ``repository.csv``, ``user.csv``
        and ``access_log.csv``.
    config_path
        Path of the YAML chart configuration.
    out_dir
        Directory receiving chart images and ``report.pdf``; created when
        missing.
    log_level
        femtologging level name.
    json_out
        Optional path for a JSON dump of the computed statistics.

    """

    snapshot_dir: Path = Path("raw")
    config_path: Path = Path("analyst.yaml")
    out_dir: Path = Path("out")
    log_level: str = "INFO"
    json_out: Path | None = None

    @property
    def pdf_path(self) -> Path:
        """Return the path of the generated PDF report."""
        return self.out_dir / "report.pdf"

    @staticmethod
    def _path_from_env(env_var: str, default: Path) -> Path:
        raw = os.environ.get(env_var, "")
        if not raw.strip():
            return default
        return Path(raw.strip())

    @classmethod
    def from_env(cls) -> AnalystSettings:
        """Create settings from ``HARBOR_ANALYST_*`` environment variables.

        Reads ``HARBOR_ANALYST_SNAPSHOT_DIR``, ``HARBOR_ANALYST_CONFIG``,
        ``HARBOR_ANALYST_OUT_DIR`` and ``HARBOR_ANALYST_LOG_LEVEL``; blank or
        unset variables keep their defaults.
        """
        defaults = cls()
        log_level = os.environ.get(LOG_LEVEL_ENV, "").strip() or defaults.log_level
        return cls(
            snapshot_dir=cls._path_from_env(SNAPSHOT_DIR_ENV, defaults.snapshot_dir),
            config_path=cls._path_from_env(CONFIG_PATH_ENV, defaults.config_path),
            out_dir=cls._path_from_env(OUT_DIR_ENV, defaults.out_dir),
            log_level=log_level,
        )
