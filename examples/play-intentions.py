import pyarrow as pa

from tidyintent import X, filtering, grouping, mean, mutating, n, sd, summarizing

penguins = pa.table(
    {
        "species": ["Adelie", "Adelie", "Gentoo", "Adelie", "Gentoo", "Chinstrap"],
        "sex": ["male", "female", "male", None, "female", "female"],
        "bill_length_mm": [39.1, 39.5, 46.1, 36.7, 46.5, 46.5],
        "bill_depth_mm": [18.7, 17.4, 13.2, 19.3, 13.5, 17.9],
        "body_mass_g": [3750.0, 3800.0, 5500.0, None, 4550.0, 3500.0],
    }
)

# Steps are written once, without any data.
smz_mass = summarizing(
    mean_mass=mean("body_mass_g"),
    sd_mass=sd("body_mass_g"),
    n=n(),
    groups="drop",
)
by_sex = grouping("sex")
flts = filtering(X.sex.is_valid(), X.species == "Adelie")
ratio = mutating(ratio=X.bill_length_mm / X.bill_depth_mm)

# And then reused in different analyses.
print(smz_mass(penguins))
print((smz_mass @ by_sex)(penguins))
print((smz_mass @ by_sex @ flts)(penguins))
print(penguins >> flts >> ratio)
