from bucketnav.mcp.server import main

main()
