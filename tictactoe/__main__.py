from tictactoe.main import main

main()
