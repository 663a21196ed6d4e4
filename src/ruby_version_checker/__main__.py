from ruby_version_checker.cli import main

main()
