"""Allow ``python -m harbor_analyst``."""

from harbor_analyst.cli import main

raise SystemExit(main())
