from github_app_token.cli import main

main()
