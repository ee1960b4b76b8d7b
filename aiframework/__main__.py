from aiframework.cli import main

main()
