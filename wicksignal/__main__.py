from wicksignal.main import main

raise SystemExit(main())
