from space_duel.main import my_app


if __name__ == "__main__":
    my_app()
