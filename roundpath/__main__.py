from roundpath.app import main

raise SystemExit(main())
