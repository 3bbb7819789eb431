from productcache.api.app import main

main()
