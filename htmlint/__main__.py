from htmlint.cli import main

raise SystemExit(main())
