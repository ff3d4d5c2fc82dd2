from foldline.main import main

raise SystemExit(main())
