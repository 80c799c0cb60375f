from speech_analysis.app import main

raise SystemExit(main())
