from game2048.play import main

main()
