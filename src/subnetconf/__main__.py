from subnetconf.cli import main

main()
