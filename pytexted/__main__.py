from pytexted.main import main

raise SystemExit(main())
