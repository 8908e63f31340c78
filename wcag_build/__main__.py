from wcag_build.cli import main

raise SystemExit(main())
