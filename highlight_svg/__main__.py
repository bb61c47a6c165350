from highlight_svg.server import main

main()
