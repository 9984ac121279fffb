import pandas as pd

from vib_app.config import CONFIG
from vib_core.machine import MachineParameters
from vib_core.masses import component_masses
from vib_core.frequencies import NaturalFrequencyAnalyzer
from vib_core.modes import radial_orders_from_force_orders


def main():
    CONFIG.configure_logging()

    # ===== 36 slot stator in a steel frame (example data) =====
    machine = MachineParameters(
        s=36,
        R_so=0.1,        # m
        R_si=0.07,       # m
        w_bi=0.01,       # yoke thickness (m)
        L=0.2,           # stack length (m)
        k_i=0.95,
        d_s=0.02,        # slot depth (m)
        w_th=0.005,      # tooth width (m)
        rho_c=7650.0,    # kg/m^3
        E_plane=200e9,   # Pa
        nu_plane=0.3,
        D_f=0.25,        # m
        L_f=0.25,        # m
        h_f=0.01,        # m
        rho_f=7850.0,
        E_f=200e9,
        nu_f=0.3,
        rho_w=8900.0,
    )

    masses = component_masses(machine)
    print("Masses (kg):")
    for name, value in masses.as_dict().items():
        print(f"  {name:22s} {value:10.4f}")

    # radial orders 0..3, then the lowest force order 4 and its multiples
    radial_orders = radial_orders_from_force_orders([0, 4, 8, 12])

    table = NaturalFrequencyAnalyzer(machine).run(radial_orders)
    df = table.to_dataframe()

    print(f"\n--- {df.attrs['description']} ---")
    with pd.option_context("display.float_format", "{:10.1f}".format):
        print(df)

    hoppe = NaturalFrequencyAnalyzer(machine, core_model="hoppe").run(radial_orders)
    print("\n--- Stator core, Donnell-Mushtari vs Hoppe (Hz, n=1) ---")
    for row_dm, row_h in zip(table, hoppe):
        if row_dm.n == 1:
            print(f"  {row_dm.label:8s} {row_dm.core:10.1f} {row_h.core:10.1f}")


if __name__ == "__main__":
    main()
