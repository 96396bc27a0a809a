from jett.cli.main import main

main()
