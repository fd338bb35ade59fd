from geosketch.main import main

raise SystemExit(main())
