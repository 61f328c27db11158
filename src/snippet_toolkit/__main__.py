from snippet_toolkit.cli import main

raise SystemExit(main())
