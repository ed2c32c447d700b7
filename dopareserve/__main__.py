from dopareserve.ui.main_window import launch_app

launch_app()
