"""Application entry point."""
from pickballs.ui.main_window import MainWindow


def main():
    """Main application entry point."""
    app = MainWindow()
    app.initialize()
    app.run()


if __name__ == "__main__":
    main()
