# file: main.py

import logging
import os
import customtkinter as ctk
from pathlib import Path

from core.command_executor import CommandExecutor
from core.command_factory import CommandFactory
from utils.config_loader import ConfigLoader
from utils.logger import setup_logging
from ui.command_binding import bind_command
from ui.counter_view_model import CounterViewModel


class CounterApp(ctk.CTk):
    """
    Small demo window: buttons bound to the counter view-model's commands.
    The "-1" button greys out at zero, the "+N" button follows the entry.
    """
    def __init__(self, view_model: CounterViewModel, executor: CommandExecutor):
        super().__init__()
        self.title("Relay commands")
        self.geometry("320x160")
        self.view_model = view_model
        self.logger = logging.getLogger(self.__class__.__name__)

        self.count_label = ctk.CTkLabel(self, text="0", font=ctk.CTkFont(size=24))
        self.count_label.grid(row=0, column=0, columnspan=3, padx=10, pady=10)

        increment_button = ctk.CTkButton(self, text="+1", width=60)
        increment_button.grid(row=1, column=0, padx=5, pady=5)
        decrement_button = ctk.CTkButton(self, text="-1", width=60)
        decrement_button.grid(row=1, column=1, padx=5, pady=5)

        self.amount_var = ctk.StringVar(value="5")
        amount_entry = ctk.CTkEntry(self, textvariable=self.amount_var, width=60)
        amount_entry.grid(row=2, column=0, padx=5, pady=5)
        add_button = ctk.CTkButton(self, text="+N", width=60)
        add_button.grid(row=2, column=1, padx=5, pady=5)

        self.bindings = [
            bind_command(increment_button, view_model.increment_command, executor=executor),
            bind_command(decrement_button, view_model.decrement_command, executor=executor),
        ]
        self.add_binding = bind_command(add_button, view_model.add_command, parameter=5, executor=executor)
        self.bindings.append(self.add_binding)

        self.amount_var.trace_add("write", self._on_amount_changed)
        view_model.add_count_listener(lambda count: self.count_label.configure(text=str(count)))
        self.protocol("WM_DELETE_WINDOW", self.quit)

    def _on_amount_changed(self, *args):
        try:
            amount = int(self.amount_var.get())
        except ValueError:
            # Non-numeric input disables the button
            amount = 0
        self.add_binding.set_parameter(amount)

    def quit(self):
        for binding in self.bindings:
            binding.unbind()
        self.destroy()


if __name__ == "__main__":
    app_data_dir = Path(os.getenv("APPDATA") or Path.home() / ".config" / "RelayCommands") / "config"
    config_loader = ConfigLoader(app_data_dir)
    config_loader.load_all_configs()
    setup_logging(config_loader)

    view_model = CounterViewModel(CommandFactory(config_loader))
    app = CounterApp(view_model, CommandExecutor(config_loader))

    logging.info("Starting CustomTkinter main loop...")
    app.mainloop()
    logging.info("Application shutting down.")
