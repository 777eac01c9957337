from bindeploy.presentation.cli.cli import main

main()
