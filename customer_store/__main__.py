from customer_store.main import run


if __name__ == "__main__":
    run()
