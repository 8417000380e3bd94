from identspell.cli import main

raise SystemExit(main())
