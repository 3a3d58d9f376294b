"""Allow ``python -m scaffoldkit``."""

from scaffoldkit.cli import main

raise SystemExit(main())
