from speckit_config.cli import main

main()
