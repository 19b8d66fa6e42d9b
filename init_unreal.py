import unreal

import texture_binder_menu


texture_binder_menu.register_menu()
unreal.register_python_shutdown_callback(texture_binder_menu.unregister_menu)

unreal.log("Texture Binder loaded")
