from f1dash.cli import main

raise SystemExit(main())
