from metadata_server.server import main

main()
