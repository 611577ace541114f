from article_store.main import main

main()
