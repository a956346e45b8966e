from tagfilter.cli.main import main

main()
