from create_rust_app.cli import main

raise SystemExit(main())
