from resource_docgen.cli import main

main()
