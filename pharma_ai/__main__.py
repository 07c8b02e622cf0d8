from pharma_ai.api.main import main

main()
