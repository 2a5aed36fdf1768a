from chessterm.app import main

main()
